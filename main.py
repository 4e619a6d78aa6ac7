import logging

from fastapi import FastAPI
from app.api.v1 import api
from app.core.config import settings

logging.basicConfig(level=settings.LOG_LEVEL, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")

app = FastAPI(
	title=settings.PROJECT_NAME,
	description="API for volumetric weight and shipping rate calculation",
	version="1.0.0",
	lifespan=api.lifespan,
)

app.include_router(api.router)


@app.get("/health")
async def health():
	return {"status": "ok"}


if __name__ == "__main__":
	import uvicorn

	uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
