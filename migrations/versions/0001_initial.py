"""initial warehouse schema

Revision ID: 0001_initial
Revises:
Create Date: 2024-11-04 00:00:00.000000
"""

from alembic import op
import sqlalchemy as sa


revision = "0001_initial"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "items",
        sa.Column("uid", sa.String(length=64), primary_key=True),
        sa.Column("code", sa.String(length=100), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("short_description", sa.String(length=255), nullable=True),
        sa.Column("upc_code", sa.String(length=100), nullable=True),
        sa.Column("model_number", sa.String(length=100), nullable=True),
        sa.Column("commodity_code", sa.String(length=100), nullable=True),
        sa.Column("supplier_code", sa.String(length=100), nullable=True),
        sa.Column("supplier_part_number", sa.String(length=100), nullable=True),
        sa.Column("unit_purchase_quantity", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("unit_order_quantity", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("pack_order_quantity", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
    )
    op.create_index("ix_items_code", "items", ["code"], unique=False)

    op.create_table(
        "locations",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("warehouse_id", sa.Integer(), nullable=False),
        sa.Column("code", sa.String(length=100), nullable=False),
        sa.Column("row", sa.String(length=50), nullable=False),
        sa.Column("rack", sa.String(length=50), nullable=False),
        sa.Column("shelf", sa.String(length=50), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.UniqueConstraint("warehouse_id", "row", "rack", "shelf", name="uq_locations_slot"),
    )
    op.create_index("ix_locations_warehouse_id", "locations", ["warehouse_id"], unique=False)

    op.create_table(
        "transfers",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("reference", sa.String(length=255), nullable=True),
        sa.Column("from_location_id", sa.Integer(), sa.ForeignKey("locations.id"), nullable=True),
        sa.Column("to_location_id", sa.Integer(), sa.ForeignKey("locations.id"), nullable=True),
        sa.Column("status", sa.String(length=50), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
    )
    op.create_index("ix_transfers_from_location_id", "transfers", ["from_location_id"], unique=False)
    op.create_index("ix_transfers_to_location_id", "transfers", ["to_location_id"], unique=False)
    op.create_index("ix_transfers_status", "transfers", ["status"], unique=False)

    op.create_table(
        "transfer_items",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "transfer_id",
            sa.Integer(),
            sa.ForeignKey("transfers.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("item_uid", sa.String(length=64), sa.ForeignKey("items.uid"), nullable=False),
        sa.Column("amount", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.CheckConstraint("amount > 0", name="ck_transfer_items_amount_positive"),
    )
    op.create_index("ix_transfer_items_transfer_id", "transfer_items", ["transfer_id"], unique=False)
    op.create_index("ix_transfer_items_item_uid", "transfer_items", ["item_uid"], unique=False)

    op.create_table(
        "docks",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("warehouse_id", sa.Integer(), nullable=False),
        sa.Column("shipment_id", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("status", sa.String(length=20), nullable=False, server_default="unoccupied"),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=True),
    )
    op.create_index("ix_docks_warehouse_id", "docks", ["warehouse_id"], unique=False)

    op.create_table(
        "request_logs",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("api_key", sa.String(length=255), nullable=False),
        sa.Column("method", sa.String(length=10), nullable=False),
        sa.Column("path", sa.String(length=500), nullable=False),
        sa.Column("status_code", sa.Integer(), nullable=False),
        sa.Column("trace_id", sa.String(length=64), nullable=True),
        sa.Column("request_body", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
    )
    op.create_index("ix_request_logs_created_at", "request_logs", ["created_at"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_request_logs_created_at", table_name="request_logs")
    op.drop_table("request_logs")
    op.drop_index("ix_docks_warehouse_id", table_name="docks")
    op.drop_table("docks")
    op.drop_index("ix_transfer_items_item_uid", table_name="transfer_items")
    op.drop_index("ix_transfer_items_transfer_id", table_name="transfer_items")
    op.drop_table("transfer_items")
    op.drop_index("ix_transfers_status", table_name="transfers")
    op.drop_index("ix_transfers_to_location_id", table_name="transfers")
    op.drop_index("ix_transfers_from_location_id", table_name="transfers")
    op.drop_table("transfers")
    op.drop_index("ix_locations_warehouse_id", table_name="locations")
    op.drop_table("locations")
    op.drop_index("ix_items_code", table_name="items")
    op.drop_table("items")
