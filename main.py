from fastapi import FastAPI, Request
from fastapi.responses import RedirectResponse
from routers.analysis import router as analysis_router
from routers.profile import router as profile_router
import uvicorn
from db.database import Base, engine
from env import PORT
from logger_manager import log_info


app = FastAPI(title="HealthScan API")


@app.on_event("startup")
async def startup_event():
    # Create the health profile table if it does not exist yet
    Base.metadata.create_all(bind=engine)
    log_info("Database tables ready")

@app.get("/")
def read_root():
    return RedirectResponse("/docs")

@app.middleware("http")
async def log_requests(request: Request, call_next):
    response = await call_next(request)
    log_info(f"Request: {request.method} {request.url} -> {response.status_code}")
    return response

app.include_router(analysis_router, prefix="/api/analysis")
app.include_router(profile_router, prefix="/api/profile")

# To run the FastAPI app, use the command: uvicorn main:app --reload
if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=PORT)
