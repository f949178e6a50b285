from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from ..models.movie import Movie, StoreOutcome, StoreResponse
from ..repositories.movie_repository import MovieRepository


router = APIRouter(tags=["movies"])


# Dependency to get repository (set up in main.py lifespan)
async def get_repository(request: Request) -> MovieRepository:
    return request.app.state.repository


@router.get("/movie/{movie_id}", response_model=Movie)
async def get_movie(
    movie_id: str,
    repository: MovieRepository = Depends(get_repository)
) -> Movie:
    """
    Get a movie by id

    Args:
        movie_id: Movie identifier

    Returns:
        The movie, possibly served from cache
    """
    movie = await repository.fetch(movie_id)

    if movie is None:
        raise HTTPException(status_code=404, detail=f"Movie '{movie_id}' not found")

    return movie


@router.post("/movie", response_model=StoreResponse, status_code=status.HTTP_201_CREATED)
async def add_movie(
    movie: Movie,
    response: Response,
    repository: MovieRepository = Depends(get_repository)
) -> StoreResponse:
    """
    Save a movie

    Returns 201 when the id is new and 202 when an existing movie was replaced.
    """
    outcome = await repository.store(movie)
    if outcome is StoreOutcome.UPDATED:
        response.status_code = status.HTTP_202_ACCEPTED

    return StoreResponse(id=movie.id, outcome=outcome)
