# talord/adapters/api/routers/health.py
from typing import Any, Dict

from fastapi import APIRouter, Depends

from talord.adapters.api.dependencies import get_lexicon
from talord.core.domain.lexicon import NumeralLexicon

router = APIRouter(prefix="/health", tags=["Health"])


@router.get("", summary="Liveness and lexicon status")
async def health(lexicon: NumeralLexicon = Depends(get_lexicon)) -> Dict[str, Any]:
    return {
        "status": "ok",
        "lexicon": lexicon.language,
        "magnitudes": len(lexicon.magnitudes),
    }
