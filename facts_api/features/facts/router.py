"""Facts API routes - main router that includes the parse and lookup route modules."""

from fastapi import APIRouter

from facts_api.features.facts.routes.facts import router as facts_router
from facts_api.features.facts.routes.parse import router as parse_router

router = APIRouter(tags=["facts"])

# Include all route handlers
router.include_router(parse_router)
router.include_router(facts_router)
