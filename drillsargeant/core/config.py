import os

from pydantic import BaseModel


class Settings(BaseModel):
    # Prefixed so generic APP_NAME / HOST / PORT set by the host environment are ignored
    APP_NAME: str = os.getenv("DRILLSARGEANT_APP_NAME", "DrillSargeant Desktop")
    APP_VERSION: str = os.getenv("DRILLSARGEANT_APP_VERSION", "1.0")

    # Local server the desktop front-end talks to
    HOST: str = os.getenv("DRILLSARGEANT_HOST", "127.0.0.1")
    PORT: int = int(os.getenv("DRILLSARGEANT_PORT", "1420"))


settings = Settings()
