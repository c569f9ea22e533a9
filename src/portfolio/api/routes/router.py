from fastapi import APIRouter

from src.portfolio.api.routes import chat, contacts, projects

api_router = APIRouter()
api_router.include_router(projects.router)
api_router.include_router(contacts.router)
api_router.include_router(chat.router)
