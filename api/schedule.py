from fastapi import APIRouter, HTTPException
from schemas.schedule.generate import ScheduleRequest
from scheduler.builder import generate_schedule
from scheduler.extractor import summarize_by_slot
from utils.constants import EMPTY_SCHEDULE_MESSAGE
from utils.loader import parse_rules
from utils.phrasing import confidence_phrasing, get_confidence_band
from utils.time_utils import normalise_date
from exceptions.custom_errors import *
import traceback
from docs.schedule.generate import schedule_generate_description

router = APIRouter(prefix="/schedule", tags=["Schedule"])


# generate schedule
@router.post(
    "/generate",
    response_model=dict,
    description=schedule_generate_description,
    summary="Generate Schedule",
)
async def generate(request: ScheduleRequest):
    try:
        items = [i.to_domain() for i in request.items]

        if not items:
            return {
                "ok": True,
                "schedule": {
                    "date": normalise_date(request.date),
                    "items": [],
                    "warnings": [],
                    "overallConfidence": 100,
                    "disclaimer": EMPTY_SCHEDULE_MESSAGE,
                },
                "summary": summarize_by_slot([]),
                "confidenceBand": get_confidence_band(100),
                "confidencePhrasing": confidence_phrasing(100),
            }

        # no profiles in the request -> built-in catalog
        profiles = None
        if request.profiles:
            profiles = [p.to_domain() for p in request.profiles]

        schedule = generate_schedule(
            date=request.date,
            items=items,
            profiles=profiles,
            additional_rules=parse_rules(request.additionalRules),
            meals=request.meals.to_domain() if request.meals else None,
            wake_time=request.wakeTime,
            max_separation_passes=request.maxSeparationPasses,
        )

        # ==== final response ====
        response = {
            "ok": True,
            "schedule": schedule.to_dict(),
            "summary": summarize_by_slot(schedule.items),
            "confidenceBand": get_confidence_band(schedule.overall_confidence),
            "confidencePhrasing": confidence_phrasing(schedule.overall_confidence),
        }
        return response

    except tuple(CUSTOM_ERRORS) as e:
        raise HTTPException(status_code=CUSTOM_ERRORS[type(e)], detail=str(e))
    except ValueError as e:
        # unparseable date
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        tb = traceback.format_exc()
        raise HTTPException(status_code=500, detail=f"{str(e)}\n\nTraceback:\n{tb}")
