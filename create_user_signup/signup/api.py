import logging
import os
import uuid
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from oidcauthlib.container.simple_container import SimpleContainer
from starlette.middleware.cors import CORSMiddleware

from create_user_signup.container.container_factory import SignupContainerFactory
from create_user_signup.signup.auth.token_resolver import TokenResolver
from create_user_signup.signup.managers.signup_submission_manager import (
    SignupSubmissionManager,
)
from create_user_signup.signup.routers.signup_router import SignupRouter
from create_user_signup.signup.utilities.signup_environment_variables import (
    SignupEnvironmentVariables,
)

logger = logging.getLogger(__name__)

log_level = os.getenv("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=getattr(logging, log_level, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

# httpx logs every request at INFO
logging.getLogger("httpx").setLevel(logging.WARNING)


@asynccontextmanager
async def lifespan(app1: FastAPI) -> AsyncGenerator[None, None]:
    worker_id = id(app1)
    try:
        logger.info(f"Starting application initialization for worker {worker_id}...")
        logger.info(f"Application initialization completed for worker {worker_id}")
        yield

    except Exception as e:
        logger.exception(e, stack_info=True)
        raise

    finally:
        logger.info(f"Application shutdown completed for worker {worker_id}")


def create_app(*, container: SimpleContainer | None = None) -> FastAPI:
    container = container or SignupContainerFactory.create_container(
        source=f"{__name__}[{uuid.uuid4().hex}]"
    )
    app1: FastAPI = FastAPI(title="Create User Signup", lifespan=lifespan)
    app1.include_router(
        SignupRouter(
            submission_manager=container.resolve(SignupSubmissionManager),
            token_resolver=container.resolve(TokenResolver),
        ).get_router()
    )

    @app1.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    environment_variables: SignupEnvironmentVariables = container.resolve(
        SignupEnvironmentVariables
    )
    allowed_origins = environment_variables.allowed_origins or ["*"]
    app1.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    return app1


app = create_app()
