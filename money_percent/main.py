"""FastAPI application entrypoint."""

from dotenv import load_dotenv
from fastapi import FastAPI

from money_percent.adapters.inbound.http.routes import router

# Load environment variables from .env file
load_dotenv()

app = FastAPI(
    title="Money Percent",
    description="Percentage adjustments of monetary amounts",
    version="0.1.0",
)

app.include_router(router)
