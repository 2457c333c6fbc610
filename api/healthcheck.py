from fastapi import APIRouter
from utils.loader import load_item_profiles, load_rule_catalog

router = APIRouter(prefix="/health", tags=["Health Check"])


@router.get("/check", summary="Health Check")
def healthcheck():
    rules = load_rule_catalog()
    return {
        "status": "ok",
        "rules": len(rules["generic"]) + len(rules["specific"]),
        "profiles": len(load_item_profiles()),
    }
