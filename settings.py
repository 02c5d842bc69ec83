from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    # JSON API ANU QRNG (ключ выдаётся в личном кабинете quantumnumbers.anu.edu.au)
    QRNG_API_URL: str = "https://api.quantumnumbers.anu.edu.au"
    QRNG_API_KEY: str = ""                # пусто = ключ не настроен
    QRNG_TIMEOUT: float = 20.0            # секунды на весь запрос

settings = Settings()
