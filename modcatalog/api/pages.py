"""
Pages API

Serves the HTML edit forms for mods and versions.
"""

from typing import Dict

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from modcatalog.api.v1.dependencies import get_mod_service
from modcatalog.core.config import resolve_project_path, settings
from modcatalog.core.logger import get_logger
from modcatalog.services.mod_service import ModService, ModUpdateData, VersionCreateData
from modcatalog.ui.definitions import LOADERS, MOD_FIELDS, VERSION_FIELDS
from modcatalog.ui.form import FormController

logger = get_logger(__name__)

router = APIRouter(tags=["pages"])
templates = Jinja2Templates(directory=str(resolve_project_path(settings.templates__dir)))


async def _posted_fields(request: Request) -> Dict[str, str]:
    form = await request.form()
    return {key: value for key, value in form.items() if isinstance(value, str)}


def _mod_or_404(service: ModService, mod_id: str):
    mod = service.get_mod(mod_id)
    if not mod:
        raise HTTPException(status_code=404, detail="Mod not found")
    return mod


@router.get("/mods", response_class=HTMLResponse)
async def mods_page(request: Request, service: ModService = Depends(get_mod_service)):
    """Mod listing page."""
    return templates.TemplateResponse(
        request, "mods.html", {"mods": service.list_mods(), "active_page": "mods"}
    )


@router.get("/mods/{mod_id}/edit", response_class=HTMLResponse)
async def mod_edit_page(
    request: Request, mod_id: str, service: ModService = Depends(get_mod_service)
):
    """Mod edit form, with the mod's versions listed below."""
    mod = _mod_or_404(service, mod_id)
    form = FormController(
        MOD_FIELDS, mod.model_dump(), action=f"/mods/{mod.id}/edit", form_id="mod-form"
    )
    return templates.TemplateResponse(
        request,
        "mod_edit.html",
        {
            "mod": mod,
            "form": form,
            "versions": service.list_versions(mod.id),
            "active_page": "mods",
        },
    )


@router.post("/mods/{mod_id}/edit")
async def mod_edit_submit(
    request: Request, mod_id: str, service: ModService = Depends(get_mod_service)
):
    """
    Apply a posted mod form.

    The posted values are replayed through the form fields, so cleared
    inputs report ``None`` and leave the stored value untouched.
    """
    mod = _mod_or_404(service, mod_id)
    form = FormController(MOD_FIELDS, mod.model_dump())
    changes = form.submit(await _posted_fields(request))

    update = ModUpdateData(**{key: value for key, value in changes.items() if value is not None})
    updated = service.update_mod(mod_id, update)
    logger.info(
        "Page: Mod %s updated via form (%s)",
        updated.id,
        ", ".join(sorted(changes)) or "no changes",
    )
    return RedirectResponse(url=f"/mods/{updated.id}/edit", status_code=303)


def _version_form(mod_id: str) -> FormController:
    return FormController(
        VERSION_FIELDS,
        {"loader": LOADERS[0]},
        action=f"/mods/{mod_id}/versions/new",
        form_id="version-form",
    )


@router.get("/mods/{mod_id}/versions/new", response_class=HTMLResponse)
async def version_new_page(
    request: Request, mod_id: str, service: ModService = Depends(get_mod_service)
):
    mod = _mod_or_404(service, mod_id)
    return templates.TemplateResponse(
        request,
        "version_new.html",
        {"mod": mod, "form": _version_form(mod.id), "active_page": "mods"},
    )


@router.post("/mods/{mod_id}/versions/new")
async def version_new_submit(
    request: Request, mod_id: str, service: ModService = Depends(get_mod_service)
):
    mod = _mod_or_404(service, mod_id)
    form = _version_form(mod.id)
    form.submit(await _posted_fields(request))

    version = service.add_version(mod.id, VersionCreateData(**form.values))
    logger.info("Page: Version %s added to mod %s", version.id, mod.id)
    return RedirectResponse(url=f"/mods/{mod.id}/edit", status_code=303)


__all__ = ["router", "templates"]
