"""
Game Inventory — Console Route Handlers
========================================

What:  HTML pages for listing, viewing, creating, updating and deleting consoles.
How:   Handlers read the form, delegate to ConsoleService, then render a
       template or redirect with 303 See Other so the browser follows up
       with a GET.

Route order matters: `/console/create` is registered before
`/console/{console_id}` so "create" is never parsed as an id.
"""

import logging
import uuid

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse

from game_inventory.dependencies import console_id_path, get_console_service
from game_inventory.exceptions import DeleteBlockedError, FormValidationError
from game_inventory.services.console_service import CONSOLE_LIST_URL, ConsoleService
from game_inventory.templating import render

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Consoles"], default_response_class=HTMLResponse)


def _redirect(url: str) -> RedirectResponse:
    return RedirectResponse(url=url, status_code=status.HTTP_303_SEE_OTHER)


@router.get("/consoles", summary="List all consoles")
async def console_list(
    request: Request,
    service: ConsoleService = Depends(get_console_service),
):
    consoles = await service.list_consoles()
    return render(request, "console_list.html", {
        "title": "Console List",
        "console_list": consoles,
    })


@router.get("/console/create", summary="Console create form")
async def console_create_get(request: Request):
    return render(request, "console_form.html", {"title": "Create Console"})


@router.post("/console/create", summary="Create a console")
async def console_create_post(
    request: Request,
    service: ConsoleService = Depends(get_console_service),
):
    """
    Create a console from the submitted form.

    Invalid input redisplays the form with every field error and the
    sanitized values; a name that already exists redirects to that console.
    """
    form = await request.form()
    try:
        url = await service.create_console(form)
    except FormValidationError as e:
        return render(request, "console_form.html", {
            "title": "Create Console",
            "console": e.values,
            "errors": e.errors,
        })
    return _redirect(url)


@router.get("/console/{console_id}/delete", summary="Console delete confirmation")
async def console_delete_get(
    request: Request,
    console_id: uuid.UUID = Depends(console_id_path),
    service: ConsoleService = Depends(get_console_service),
):
    console, games = await service.get_console_for_delete(console_id)
    if console is None:
        return _redirect(CONSOLE_LIST_URL)
    return render(request, "console_delete.html", {
        "title": "Delete Console",
        "console": console,
        "console_games": games,
    })


@router.post("/console/{console_id}/delete", summary="Delete a console")
async def console_delete_post(
    request: Request,
    console_id: uuid.UUID = Depends(console_id_path),
    service: ConsoleService = Depends(get_console_service),
):
    """
    Delete the console, or show the confirmation page again listing the
    games that still reference it.
    """
    try:
        url = await service.delete_console(console_id)
    except DeleteBlockedError as e:
        return render(request, "console_delete.html", {
            "title": "Delete Console",
            "console": e.record,
            "console_games": e.dependents,
        })
    return _redirect(url)


@router.get("/console/{console_id}/update", summary="Console update form")
async def console_update_get(
    request: Request,
    console_id: uuid.UUID = Depends(console_id_path),
    service: ConsoleService = Depends(get_console_service),
):
    console = await service.get_console_for_update(console_id)
    return render(request, "console_form.html", {
        "title": "Update Console",
        "console": console,
    })


@router.post("/console/{console_id}/update", summary="Update a console")
async def console_update_post(
    request: Request,
    console_id: uuid.UUID = Depends(console_id_path),
    service: ConsoleService = Depends(get_console_service),
):
    form = await request.form()
    try:
        url = await service.update_console(console_id, form)
    except FormValidationError as e:
        return render(request, "console_form.html", {
            "title": "Update Console",
            "console": e.values,
            "errors": e.errors,
        })
    return _redirect(url)


@router.get("/console/{console_id}", summary="Console detail")
async def console_detail(
    request: Request,
    console_id: uuid.UUID = Depends(console_id_path),
    service: ConsoleService = Depends(get_console_service),
):
    console, games = await service.get_console_detail(console_id)
    return render(request, "console_detail.html", {
        "title": "Console Detail",
        "console": console,
        "console_games": games,
    })
