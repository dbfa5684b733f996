# models_bootstrap.py
from organization import models as _org_models
from position import models as _position_models
