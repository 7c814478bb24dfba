"""
Game Inventory — Game Route Handlers
=====================================

What:  The home page plus HTML pages for listing, viewing, creating,
       updating and deleting games.
How:   Same shape as the console routes. Create and update forms always
       carry the console list for their select control, including when a
       failed submission is redisplayed.

Route order matters: `/game/create` is registered before `/game/{game_id}`.
"""

import logging
import uuid

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse

from game_inventory.dependencies import game_id_path, get_game_service
from game_inventory.exceptions import FormValidationError
from game_inventory.services.game_service import GAME_LIST_URL, GameService
from game_inventory.templating import render

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Games"], default_response_class=HTMLResponse)


def _redirect(url: str) -> RedirectResponse:
    return RedirectResponse(url=url, status_code=status.HTTP_303_SEE_OTHER)


@router.get("/", summary="Home page with inventory counts")
async def index(
    request: Request,
    service: GameService = Depends(get_game_service),
):
    counts = await service.get_counts()
    return render(request, "index.html", {
        "title": "Game Inventory Home",
        "game_count": counts.game_count,
        "console_count": counts.console_count,
    })


@router.get("/games", summary="List all games")
async def game_list(
    request: Request,
    service: GameService = Depends(get_game_service),
):
    games = await service.list_games()
    return render(request, "game_list.html", {
        "title": "Game List",
        "game_list": games,
    })


@router.get("/game/create", summary="Game create form")
async def game_create_get(
    request: Request,
    service: GameService = Depends(get_game_service),
):
    consoles = await service.get_create_form()
    return render(request, "game_form.html", {
        "title": "Create Game",
        "consoles": consoles,
    })


@router.post("/game/create", summary="Create a game")
async def game_create_post(
    request: Request,
    service: GameService = Depends(get_game_service),
):
    form = await request.form()
    try:
        url = await service.create_game(form)
    except FormValidationError as e:
        consoles = await service.get_create_form()
        return render(request, "game_form.html", {
            "title": "Create Game",
            "consoles": consoles,
            "game": e.values,
            "errors": e.errors,
        })
    return _redirect(url)


@router.get("/game/{game_id}/delete", summary="Game delete confirmation")
async def game_delete_get(
    request: Request,
    game_id: uuid.UUID = Depends(game_id_path),
    service: GameService = Depends(get_game_service),
):
    game = await service.get_game_for_delete(game_id)
    if game is None:
        return _redirect(GAME_LIST_URL)
    return render(request, "game_delete.html", {
        "title": "Delete Game",
        "game": game,
    })


@router.post("/game/{game_id}/delete", summary="Delete a game")
async def game_delete_post(
    game_id: uuid.UUID = Depends(game_id_path),
    service: GameService = Depends(get_game_service),
):
    url = await service.delete_game(game_id)
    return _redirect(url)


@router.get("/game/{game_id}/update", summary="Game update form")
async def game_update_get(
    request: Request,
    game_id: uuid.UUID = Depends(game_id_path),
    service: GameService = Depends(get_game_service),
):
    game, consoles = await service.get_update_form(game_id)
    return render(request, "game_form.html", {
        "title": "Update Game",
        "consoles": consoles,
        "game": game,
    })


@router.post("/game/{game_id}/update", summary="Update a game")
async def game_update_post(
    request: Request,
    game_id: uuid.UUID = Depends(game_id_path),
    service: GameService = Depends(get_game_service),
):
    form = await request.form()
    try:
        url = await service.update_game(game_id, form)
    except FormValidationError as e:
        consoles = await service.get_create_form()
        return render(request, "game_form.html", {
            "title": "Update Game",
            "consoles": consoles,
            "game": e.values,
            "errors": e.errors,
        })
    return _redirect(url)


@router.get("/game/{game_id}", summary="Game detail")
async def game_detail(
    request: Request,
    game_id: uuid.UUID = Depends(game_id_path),
    service: GameService = Depends(get_game_service),
):
    game = await service.get_game_detail(game_id)
    return render(request, "game_detail.html", {
        "title": "Game Detail",
        "game": game,
    })
