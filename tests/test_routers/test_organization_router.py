import unittest
from unittest.mock import patch
from fastapi.testclient import TestClient

from main import app
from core.database import get_db
from core.errors import DuplicateKeyError, NotFoundError
from auth.utils.auth_utils import create_token
from organization.schema import OrganizationFilter

ORG = {"handle": "c1", "name": "C1", "description": "Desc1", "numEmployees": 1, "logoUrl": None}


class OrganizationRouterTests(unittest.TestCase):
    def setUp(self):
        class FakeDB:
            def rollback(self): pass
        def _fake_db():
            yield FakeDB()

        app.dependency_overrides[get_db] = _fake_db
        self.client = TestClient(app)
        self.admin = {"Authorization": f"Bearer {create_token('admin', is_admin=True)}"}
        self.user = {"Authorization": f"Bearer {create_token('u1')}"}

    def tearDown(self):
        app.dependency_overrides.pop(get_db, None)

    # --- LIST ---

    @patch("organization.router.service.list_organizations")
    def test_list_organizations_anon(self, mock_list):
        mock_list.return_value = [ORG]
        resp = self.client.get("/api/organizations")
        self.assertEqual(resp.status_code, 200, resp.text)
        self.assertEqual(resp.json(), [ORG])

    @patch("organization.router.service.list_organizations")
    def test_list_organizations_passes_filters(self, mock_list):
        mock_list.return_value = []
        resp = self.client.get("/api/organizations", params={"minEmployees": 10, "name": "tech"})
        self.assertEqual(resp.status_code, 200, resp.text)
        filters = mock_list.call_args.args[1]
        self.assertEqual(filters.model_dump(), OrganizationFilter(min_employees=10, name="tech").model_dump())

    def test_list_organizations_400_min_over_max(self):
        resp = self.client.get("/api/organizations", params={"minEmployees": 10, "maxEmployees": 2})
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["detail"], "Min employees cannot be greater than max")

    def test_list_organizations_422_bad_filter_type(self):
        resp = self.client.get("/api/organizations", params={"minEmployees": "many"})
        self.assertEqual(resp.status_code, 422)

    # --- GET /{handle} ---

    @patch("organization.router.service.get_organization")
    def test_get_organization_200(self, mock_get):
        mock_get.return_value = {**ORG, "positions": [{"id": 1, "title": "J1", "salary": 1, "equity": 0.1}]}
        resp = self.client.get("/api/organizations/c1")
        self.assertEqual(resp.status_code, 200, resp.text)
        body = resp.json()
        self.assertEqual(body["numEmployees"], 1)
        self.assertEqual(body["positions"], [{"id": 1, "title": "J1", "salary": 1, "equity": 0.1}])
        mock_get.assert_called_once()
        self.assertEqual(mock_get.call_args.args[1], "c1")

    @patch("organization.router.service.get_organization")
    def test_get_organization_404(self, mock_get):
        mock_get.side_effect = NotFoundError("No organization: nope")
        resp = self.client.get("/api/organizations/nope")
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json()["detail"], "No organization: nope")

    # --- CREATE ---

    @patch("organization.router.service.create_organization")
    def test_create_organization_201_admin(self, mock_create):
        mock_create.return_value = ORG
        resp = self.client.post(
            "/api/organizations",
            json={"handle": "c1", "name": "C1", "description": "Desc1", "numEmployees": 1},
            headers=self.admin,
        )
        self.assertEqual(resp.status_code, 201, resp.text)
        self.assertEqual(resp.json(), ORG)
        dto = mock_create.call_args.args[1]
        self.assertEqual(dto.num_employees, 1)

    @patch("organization.router.service.create_organization")
    def test_create_organization_401_anon(self, mock_create):
        resp = self.client.post("/api/organizations", json={"handle": "c1", "name": "C1", "description": "d"})
        self.assertEqual(resp.status_code, 401)
        self.assertEqual(resp.json()["detail"], "Unauthorized")
        mock_create.assert_not_called()

    @patch("organization.router.service.create_organization")
    def test_create_organization_401_non_admin(self, mock_create):
        resp = self.client.post(
            "/api/organizations", json={"handle": "c1", "name": "C1", "description": "d"}, headers=self.user
        )
        self.assertEqual(resp.status_code, 401)
        mock_create.assert_not_called()

    @patch("organization.router.service.create_organization")
    def test_create_organization_401_bad_token(self, mock_create):
        resp = self.client.post(
            "/api/organizations",
            json={"handle": "c1", "name": "C1", "description": "d"},
            headers={"Authorization": "Bearer not-a-token"},
        )
        self.assertEqual(resp.status_code, 401)
        mock_create.assert_not_called()

    def test_create_organization_422_extra_fields(self):
        resp = self.client.post(
            "/api/organizations",
            json={"handle": "c1", "name": "C1", "description": "d", "ceo": "x"},
            headers=self.admin,
        )
        self.assertEqual(resp.status_code, 422)

    @patch("organization.router.service.create_organization")
    def test_create_organization_400_duplicate(self, mock_create):
        mock_create.side_effect = DuplicateKeyError("Duplicate organization: c1")
        resp = self.client.post(
            "/api/organizations", json={"handle": "c1", "name": "C1", "description": "d"}, headers=self.admin
        )
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["detail"], "Duplicate organization: c1")

    # --- PATCH /{handle} ---

    @patch("organization.router.service.update_organization")
    def test_update_organization_sends_only_given_fields(self, mock_update):
        mock_update.return_value = {**ORG, "numEmployees": 5}
        resp = self.client.patch("/api/organizations/c1", json={"numEmployees": 5}, headers=self.admin)
        self.assertEqual(resp.status_code, 200, resp.text)
        self.assertEqual(resp.json()["numEmployees"], 5)
        self.assertEqual(mock_update.call_args.args[1:], ("c1", {"numEmployees": 5}))

    def test_update_organization_400_empty_body(self):
        resp = self.client.patch("/api/organizations/c1", json={}, headers=self.admin)
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["detail"], "No data")

    def test_update_organization_422_handle_in_body(self):
        resp = self.client.patch("/api/organizations/c1", json={"handle": "c9"}, headers=self.admin)
        self.assertEqual(resp.status_code, 422)

    @patch("organization.router.service.update_organization")
    def test_update_organization_422_null_name(self, mock_update):
        resp = self.client.patch("/api/organizations/c1", json={"name": None}, headers=self.admin)
        self.assertEqual(resp.status_code, 422)
        resp = self.client.patch("/api/organizations/c1", json={"description": None}, headers=self.admin)
        self.assertEqual(resp.status_code, 422)
        mock_update.assert_not_called()

    @patch("organization.router.service.update_organization")
    def test_update_organization_null_logo_is_allowed(self, mock_update):
        mock_update.return_value = ORG
        resp = self.client.patch("/api/organizations/c1", json={"logoUrl": None}, headers=self.admin)
        self.assertEqual(resp.status_code, 200, resp.text)
        self.assertEqual(mock_update.call_args.args[1:], ("c1", {"logoUrl": None}))

    @patch("organization.router.service.update_organization")
    def test_update_organization_404(self, mock_update):
        mock_update.side_effect = NotFoundError("No organization: nope")
        resp = self.client.patch("/api/organizations/nope", json={"name": "X"}, headers=self.admin)
        self.assertEqual(resp.status_code, 404)

    @patch("organization.router.service.update_organization")
    def test_update_organization_401_non_admin(self, mock_update):
        resp = self.client.patch("/api/organizations/c1", json={"name": "X"}, headers=self.user)
        self.assertEqual(resp.status_code, 401)
        mock_update.assert_not_called()

    # --- DELETE /{handle} ---

    @patch("organization.router.service.remove_organization")
    def test_delete_organization_200(self, mock_remove):
        mock_remove.return_value = None
        resp = self.client.delete("/api/organizations/c1", headers=self.admin)
        self.assertEqual(resp.status_code, 200, resp.text)
        self.assertEqual(resp.json(), {"deleted": "c1"})

    @patch("organization.router.service.remove_organization")
    def test_delete_organization_404(self, mock_remove):
        mock_remove.side_effect = NotFoundError("No organization: nope")
        resp = self.client.delete("/api/organizations/nope", headers=self.admin)
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json()["detail"], "No organization: nope")

    @patch("organization.router.service.remove_organization")
    def test_delete_organization_401_anon(self, mock_remove):
        resp = self.client.delete("/api/organizations/c1")
        self.assertEqual(resp.status_code, 401)
        mock_remove.assert_not_called()


if __name__ == "__main__":
    unittest.main()
