from tortoise import Tortoise

from ..core.config import TORTOISE_ORM_CONFIG


# Shared async context manager for database connection
class DBConnection:
    def __init__(self, config: dict = TORTOISE_ORM_CONFIG):
        self.config = config

    async def __aenter__(self):
        await Tortoise.init(config=self.config)
        await Tortoise.generate_schemas(safe=True) # Generate schema if it doesn't exist
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await Tortoise.close_connections()
