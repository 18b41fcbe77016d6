"""Application constants.

Resource paths and entity names shared by the REST layer and the alert
header helpers.
"""

# ---------------------------------------------------------------------------
# REST resource
# ---------------------------------------------------------------------------
API_PREFIX: str = "/api"
CANDIDAT_RESOURCE_PATH: str = f"{API_PREFIX}/candidats"
CANDIDAT_ENTITY_NAME: str = "candidat"

# ---------------------------------------------------------------------------
# Error keys
# ---------------------------------------------------------------------------
ERROR_ID_EXISTS: str = "idexists"
