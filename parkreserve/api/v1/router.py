"""API v1 router."""

from fastapi import APIRouter

from parkreserve.api.v1.endpoints import auth, complexes, parking_spots, profile, reservations

api_router = APIRouter()

api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(complexes.router, prefix="/complexes", tags=["complexes"])
api_router.include_router(parking_spots.router, prefix="/parking-spots", tags=["parking-spots"])
api_router.include_router(reservations.router, prefix="/reservations", tags=["reservations"])
api_router.include_router(profile.router, prefix="/profile", tags=["profile"])
