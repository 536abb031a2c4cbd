from fastapi import APIRouter, FastAPI
from fastapi.openapi.docs import get_swagger_ui_html
from fastapi.responses import HTMLResponse

SITE_TITLE = "Documentación REST API / Python"

SWAGGER_UI_PARAMETERS = {
    "docExpansion": "list",
    "defaultModelsExpandDepth": 1,
}

CUSTOM_CSS = """
.swagger-ui .topbar {
    background-color: #2b3b45;
}
"""


def id_parameter(description: str) -> dict:
    """OpenAPI path parameter for routes keyed by product id"""
    return {
        "in": "path",
        "name": "id",
        "description": description,
        "required": True,
        "schema": {"type": "integer"},
    }


def json_body(model) -> dict:
    """OpenAPI request body documenting `model` without binding it"""
    return {
        "required": True,
        "content": {"application/json": {"schema": model.model_json_schema()}},
    }


def build_docs_router(app: FastAPI) -> APIRouter:
    router = APIRouter(include_in_schema=False)

    @router.get("/docs", response_class=HTMLResponse)
    async def swagger_ui():
        html = get_swagger_ui_html(
            openapi_url=app.openapi_url,
            title=SITE_TITLE,
            swagger_ui_parameters=SWAGGER_UI_PARAMETERS,
        )
        body = html.body.decode().replace(
            "</head>", f"<style>{CUSTOM_CSS}</style></head>", 1
        )
        return HTMLResponse(body)

    return router
