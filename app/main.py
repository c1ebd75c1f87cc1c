import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

load_dotenv()

from app.config import settings

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)

# Import routers
from app.routers import career, explore, school, suggestions

app = FastAPI(
    title="Career Path Navigator API",
    description="FastAPI backend that turns a student profile into career recommendations, skill gaps and learning roadmaps.",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(career.router, prefix="/api/v1", tags=["Career Track"])
app.include_router(explore.router, prefix="/api/v1", tags=["Career Exploration"])
app.include_router(school.router, prefix="/api/v1", tags=["School Track"])
app.include_router(suggestions.router, prefix="/api/v1", tags=["College & Company Suggestions"])

@app.get("/")
async def root():
    return {"message": "Career Path Navigator API is running. Use endpoints under /api/v1/"}


# ✅ Local development runner
if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.main:app", host="127.0.0.1", port=8000, reload=True)
