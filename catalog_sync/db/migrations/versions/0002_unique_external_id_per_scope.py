from yoyo import step

__depends__ = {'0001_create_products'}

# One root row and one child row at most per external id. Two ingestions
# racing on the same id now fail the second insert instead of duplicating it.
steps = [
    step(
        """
        CREATE UNIQUE INDEX uq_products_root_external_id
            ON products(external_id) WHERE parent_id IS NULL;
        CREATE UNIQUE INDEX uq_products_child_external_id
            ON products(external_id) WHERE parent_id IS NOT NULL;
        """,
        """
        DROP INDEX IF EXISTS uq_products_child_external_id;
        DROP INDEX IF EXISTS uq_products_root_external_id;
        """
    )
]
