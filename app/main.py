from dotenv import load_dotenv


from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.api.api_v1 import router as api_v1
from app.core.config import settings
from app.core.lifespan import lifespan
from app.core.logging import get_logger
from app.services.change_enablement import InvalidChangeInputError
from app.web.router import router as web_router

load_dotenv()  # Load .env variables into os.environ

logger = get_logger(__name__)

app = FastAPI(title=settings.PROJECT_NAME, lifespan=lifespan)


@app.exception_handler(InvalidChangeInputError)
async def invalid_change_input_handler(
    request: Request, exc: InvalidChangeInputError
) -> JSONResponse:
    """Report contract violations from the core as 422s."""
    logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=422, content={"detail": str(exc)})


@app.get("/")
def root():
    return {"message": f"Hello from {settings.PROJECT_NAME}!"}


app.include_router(api_v1, prefix=settings.API_V1_PREFIX)
app.include_router(web_router, prefix="/web", tags=["web"])


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
