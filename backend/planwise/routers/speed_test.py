"""Speed test endpoints. Simulated, no real network measurement."""

from fastapi import APIRouter, Depends

from planwise.dependencies import get_speed_test
from planwise.services.speed_test import SpeedTest

router = APIRouter()


@router.get("")
async def get_speed_test_state(test: SpeedTest = Depends(get_speed_test)):
    return test.to_dict()


@router.post("/start")
async def start_speed_test(test: SpeedTest = Depends(get_speed_test)):
    test.start()
    return test.to_dict()


@router.post("/stop")
async def stop_speed_test(test: SpeedTest = Depends(get_speed_test)):
    await test.close()
    return test.to_dict()
