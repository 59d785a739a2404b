import uvicorn

from peerlearn.config import settings

if __name__ == "__main__":
    uvicorn.run("peerlearn.main:app", host=settings.HOST, port=settings.PORT, reload=settings.RELOAD)
