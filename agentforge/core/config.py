import os

class Settings:
    AGENTFORGE_API_URL = os.getenv("AGENTFORGE_API_URL", "http://127.0.0.1:5000")
    WIDGET_ORIGIN = os.getenv("WIDGET_ORIGIN", "http://127.0.0.1:5000")
    OLLAMA_MODEL = os.getenv("OLLAMA_MODEL", "llama3")
    REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "30"))
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    
settings = Settings()
