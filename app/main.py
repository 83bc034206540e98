from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from app.api import posts as posts_api
from app.api import comments as comments_api
from app.api import notes as notes_api
from app.api import upload as upload_api
from app.api import user as user_api
from app.config import settings
from app.database import create_tables, dispose_engine
from app.errors import register_error_handlers
from app.log_config import configure_logging
from app.storage.local import ensure_upload_dir

configure_logging()

app = FastAPI(title="Neighbor Notes")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

app.include_router(posts_api.router, prefix="/api/posts", tags=["posts"])
app.include_router(comments_api.router, prefix="/api/comments", tags=["comments"])
app.include_router(user_api.router, prefix="/api/users", tags=["users"])
app.include_router(upload_api.router, prefix="/api", tags=["upload"])
app.include_router(notes_api.router, prefix="/api/notes", tags=["notes"])

if settings.SERVE_UPLOADS:
    # uploaded media is served straight from disk
    app.mount(
        settings.UPLOAD_URL_PREFIX.rstrip("/"),
        StaticFiles(directory=ensure_upload_dir()),
        name="uploads",
    )

@app.on_event("startup")
async def startup():
    await create_tables()

@app.on_event("shutdown")
async def shutdown():
    await dispose_engine()

@app.get("/")
async def root():
    return {"message": "Welcome to Neighbor Notes"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.main:app", host=settings.HOST, port=settings.PORT)
