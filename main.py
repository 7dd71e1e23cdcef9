import uvicorn

from onlinetest.app import app
from onlinetest.config import HOST, PORT


if __name__ == "__main__":
    uvicorn.run(app, host=HOST, port=PORT)
