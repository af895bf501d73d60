from tortoise import BaseDBAsyncClient


async def upgrade(db: BaseDBAsyncClient) -> str:
    return """
        CREATE TABLE IF NOT EXISTS "transactions" (
    "created_at" TIMESTAMP NOT NULL DEFAULT CURRENT_TIMESTAMP,
    "updated_at" TIMESTAMP NOT NULL DEFAULT CURRENT_TIMESTAMP,
    "id" INTEGER PRIMARY KEY AUTOINCREMENT NOT NULL,
    "public_id" VARCHAR(27) NOT NULL UNIQUE,
    "product_id" INT NOT NULL,
    "title" VARCHAR(255) NOT NULL,
    "description" TEXT NOT NULL,
    "price" REAL NOT NULL DEFAULT 0 /* Sale price, never negative */,
    "category" VARCHAR(100) NOT NULL,
    "image" VARCHAR(1024),
    "sold" INT NOT NULL DEFAULT 0,
    "date_of_sale" TIMESTAMP NOT NULL
);
CREATE INDEX IF NOT EXISTS "idx_transaction_public__8b2f1c" ON "transactions" ("public_id");
CREATE INDEX IF NOT EXISTS "idx_transaction_product_4c1d7e" ON "transactions" ("product_id");
CREATE INDEX IF NOT EXISTS "idx_transaction_categor_2e9a55" ON "transactions" ("category");
CREATE INDEX IF NOT EXISTS "idx_transaction_date_of_9f03b6" ON "transactions" ("date_of_sale");
CREATE TABLE IF NOT EXISTS "aerich" (
    "id" INTEGER PRIMARY KEY AUTOINCREMENT NOT NULL,
    "version" VARCHAR(255) NOT NULL,
    "app" VARCHAR(100) NOT NULL,
    "content" JSON NOT NULL
);"""


async def downgrade(db: BaseDBAsyncClient) -> str:
    return """
        DROP TABLE IF EXISTS "transactions";"""
