from fastapi import FastAPI

from cookify.api import categories, image_ai, portal, recipes

app = FastAPI(title="Cookify", version="0.1.0")


# Include routers
app.include_router(categories.router)
app.include_router(recipes.router)
app.include_router(image_ai.router)
app.include_router(portal.router)


@app.get("/health")
async def health_check():
    return {"status": "healthy"}
