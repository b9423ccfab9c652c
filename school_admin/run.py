import uvicorn

from school_admin import create_app
from school_admin.core.config import get_settings

# Create the FastAPI app using the create_app function
app = create_app()

if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run("school_admin.run:app", host=settings.HOST, port=settings.PORT, reload=settings.DEBUG)
