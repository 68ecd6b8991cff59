from typing import Any

from fastapi import APIRouter, FastAPI, HTTPException
from fastapi.responses import RedirectResponse

from colourlovers_tools.tools.registry import ToolRegistry

app = FastAPI(title="COLOURlovers Tools API")
router = APIRouter(prefix="/api")


@app.get("/", include_in_schema=False)
async def root_redirect():
    return RedirectResponse(url="/docs")


@router.get("/health")
def health_check():
    return {"status": "ok"}


@router.get("/tools")
def list_tools(group: str | None = None):
    """Function-calling declarations, optionally restricted to one tool group."""
    try:
        return ToolRegistry.definitions([group] if group else None)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/tools/{name}/invoke")
async def invoke_tool(name: str, arguments: dict[str, Any] | None = None):
    # Upstream failures are returned as {"error": ...} with status 200.
    try:
        spec = ToolRegistry.get_spec(name)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return await ToolRegistry.acall(spec.name, arguments)


app.include_router(router)
