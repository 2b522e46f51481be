import os
from dotenv import load_dotenv


class Config:
    load_dotenv()

    DEBUG = os.getenv("DEBUG", "true").lower() == "true"
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")

    # Búsqueda pública de Genius (sin autenticación)
    GENIUS_API_BASE = os.getenv("GENIUS_API_BASE", "https://genius.com/api")
    GENIUS_TIMEOUT = float(os.getenv("GENIUS_TIMEOUT", "15"))
    GENIUS_USER_AGENT = os.getenv("GENIUS_USER_AGENT", "songfinder/1.0")
