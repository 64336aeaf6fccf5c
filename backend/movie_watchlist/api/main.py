from fastapi import APIRouter

from movie_watchlist.api.routes import movies, pages, utils

api_router = APIRouter()
api_router.include_router(pages.router)
api_router.include_router(utils.router)
api_router.include_router(movies.router)
