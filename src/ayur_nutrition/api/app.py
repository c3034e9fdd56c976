"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request

from ayur_nutrition.api.nutrition import router as nutrition_router
from ayur_nutrition.api.schemas import ReportRequest
from ayur_nutrition.app_logging import configure_logging
from ayur_nutrition.containers import AppContainer
from ayur_nutrition.domain.profile import UserProfile
from ayur_nutrition.services.samples import sample_profiles


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(debug=container.settings.debug)
    logger = logging.getLogger(__name__)
    logger.info(
        "Reference data ready: categories=%s foods=%s",
        len(container.catalog),
        len(container.foods),
    )

    app = FastAPI()
    app.state.container = container

    app.include_router(nutrition_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/recommendations")
    async def recommendations(
        profile: UserProfile, request: Request
    ) -> dict[str, object]:
        """Return catalog recommendations for a profile, best match first."""
        state_container: AppContainer = request.app.state.container
        matches = state_container.profile_matcher.match_profile(
            profile, state_container.catalog
        )
        return {"recommendations": matches}

    @app.post("/reports")
    async def report(payload: ReportRequest, request: Request) -> dict[str, object]:
        """Build a recommendation report for a profile."""
        state_container: AppContainer = request.app.state.container
        matches = state_container.profile_matcher.match_profile(
            payload.profile, state_container.catalog
        )
        built = state_container.report_builder.build_report(
            payload.profile,
            matches,
            subject_id=payload.subject_id,
            subject_name=payload.subject_name,
        )
        return {"report": built}

    @app.get("/profiles/samples")
    async def samples() -> dict[str, object]:
        """Return demonstration profiles."""
        return {"profiles": sample_profiles()}

    return app
