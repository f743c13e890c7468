# shopcart/api/__init__.py
from fastapi import FastAPI
from shopcart.api.routers import carts, users


def create_app(lifespan=None) -> FastAPI:
    app = FastAPI(title="Cart Service", version="1.0.0", lifespan=lifespan)
    app.include_router(users.router)
    app.include_router(carts.router)
    return app
