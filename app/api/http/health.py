from fastapi import APIRouter

router = APIRouter(tags=["health"])


@router.get("/health")
async def health():
    """Проверка, что API запущено"""
    return {"status": "ok", "message": "Documentation platform API is running"}
