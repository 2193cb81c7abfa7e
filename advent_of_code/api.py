import logging
from typing import Any, Dict

from fastapi import FastAPI, HTTPException

from advent_of_code import __version__, config
from advent_of_code.day1 import InvalidInstructionError
from advent_of_code.days import AVAILABLE_DAYS, DayNotAvailableError, solve_day, solve_day_text

logger = logging.getLogger(__name__)

app = FastAPI(title="Advent Calendar Solutions API", version=__version__)


@app.get("/health")
async def health():
    return {"ok": True}


@app.get("/api/days")
async def list_days():
    return [{"day": day, "title": entry.title} for day, entry in AVAILABLE_DAYS.items()]


@app.get("/api/days/{day}")
def solve_from_file(day: int) -> Dict[str, Any]:
    try:
        result = solve_day(day)
    except DayNotAvailableError as exc:
        raise HTTPException(status_code=404, detail=str(exc))
    except FileNotFoundError:
        raise HTTPException(status_code=404, detail=f"no input file for day {day}")
    except InvalidInstructionError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    except (OSError, ValueError) as exc:
        logger.warning("Could not solve day %d from file: %s", day, exc)
        raise HTTPException(status_code=422, detail=str(exc))
    return result.to_dict()


@app.post("/api/days/{day}")
def solve_from_text(day: int, data: Dict[str, Any]) -> Dict[str, Any]:
    text = data.get("input") or ""
    if not isinstance(text, str) or not text.strip():
        raise HTTPException(status_code=400, detail="input is required")

    try:
        result = solve_day_text(day, text)
    except DayNotAvailableError as exc:
        raise HTTPException(status_code=404, detail=str(exc))
    except InvalidInstructionError as exc:
        logger.info("Rejected input for day %d: %s", day, exc)
        raise HTTPException(status_code=400, detail=str(exc))
    return result.to_dict()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=config.HOST, port=int(config.PORT))
