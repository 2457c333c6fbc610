from fastapi import APIRouter, HTTPException
from schemas.catalog.profiles import profile_to_dict
from schemas.catalog.rules import rule_to_dict
from scheduler.rules import GENERIC_RULES, SPECIFIC_RULES
from utils.loader import load_item_profiles
from exceptions.custom_errors import *

router = APIRouter(prefix="/catalog", tags=["Catalog"])


@router.get("/rules", response_model=dict, summary="Built-in Interaction Rules")
def list_rules():
    return {
        "generic": [rule_to_dict(r) for r in GENERIC_RULES],
        "specific": [rule_to_dict(r) for r in SPECIFIC_RULES],
    }


@router.get("/profiles", response_model=dict, summary="Built-in Item Profiles")
def list_profiles():
    try:
        profiles = load_item_profiles()
    except tuple(CUSTOM_ERRORS) as e:
        raise HTTPException(status_code=CUSTOM_ERRORS[type(e)], detail=str(e))
    return {"profiles": [profile_to_dict(p) for p in profiles]}
