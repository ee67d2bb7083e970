from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from model_interchange.api.lifespan import lifespan
from model_interchange.api.routes.convert import router as convert_router
from model_interchange.api.routes.elements import router as elements_router
from model_interchange.api.routes.health import router as health_router
from model_interchange.api.routes.root import router as root_router
from model_interchange.core.errors import JmiError


async def jmi_error_handler(_request: Request, exc: Exception) -> JSONResponse:
    assert isinstance(exc, JmiError)
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


def create_app() -> FastAPI:
    app = FastAPI(
        title="Model Interchange API",
        description="Serve engineering model elements as JMI lists, maps and trees.",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_exception_handler(JmiError, jmi_error_handler)

    app.include_router(root_router, include_in_schema=False)
    app.include_router(health_router, include_in_schema=False)
    app.include_router(elements_router)
    app.include_router(convert_router)

    return app
