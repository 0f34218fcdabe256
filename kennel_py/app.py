import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from .routes import health, calendar, dashboard
from .config import CORS_ORIGINS, PORT

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
)

app = FastAPI(title="Kennel Calendar Backend", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(calendar.router)
app.include_router(dashboard.router)


# Run with: uvicorn kennel_py.app:app --host 0.0.0.0 --port 8000
if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=PORT)
