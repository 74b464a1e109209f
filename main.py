import logging, uvicorn
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.routers import register_routers
from core import config
from core.scheduler import init_scheduler, shutdown_scheduler  # APScheduler keep-alive

logging.basicConfig(level=config.LOG_LEVEL, format="%(asctime)s %(levelname)s [%(name)s] %(message)s")
log = logging.getLogger("uvicorn")

@asynccontextmanager
async def lifespan(app: FastAPI):
    # startup
    sched = None
    if config.KEEPALIVE_ENABLED:
        sched = init_scheduler()
        sched.start()
        log.info("APScheduler started")
    app.state.scheduler = sched
    try:
        yield
    finally:
        # shutdown
        if sched is not None:
            shutdown_scheduler(sched)
            log.info("APScheduler stopped")

app = FastAPI(title="Scam Account Registry", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_routers(app)

if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=config.HOST,
        port=config.PORT,
        reload=config.RELOAD,
    )
