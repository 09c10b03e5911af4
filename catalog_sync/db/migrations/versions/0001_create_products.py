from yoyo import step

__depends__ = {}

steps = [
    step(
        """
        CREATE TABLE products (
            product_id UUID PRIMARY KEY,
            parent_id UUID,
            init BOOLEAN,
            external_id VARCHAR(255),
            search_text VARCHAR(1024),
            name VARCHAR(1024),
            price NUMERIC,
            image TEXT,
            json_object JSONB,
            created_at TIMESTAMP WITH TIME ZONE,
            update_at TIMESTAMP WITH TIME ZONE,
            sku VARCHAR(255),
            store_product_id VARCHAR(255)
        );
        CREATE INDEX idx_products_external_id ON products(external_id);
        CREATE INDEX idx_products_parent_id ON products(parent_id);
        """,
        """
        DROP INDEX IF EXISTS idx_products_parent_id;
        DROP INDEX IF EXISTS idx_products_external_id;
        DROP TABLE IF EXISTS products;
        """
    )
]
