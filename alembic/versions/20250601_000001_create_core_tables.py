"""Create admins, landlords, properties and audit_logs tables

Revision ID: 20250601_000001
Revises: None
Create Date: 2025-06-01

The unique index on landlords.email is what keeps landlord provisioning at
one row per admin e-mail.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '20250601_000001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

PROPERTY_TYPES = (
    'CASA', 'APARTAMENTO', 'KITNET', 'STUDIO', 'COBERTURA', 'SOBRADO',
    'COMERCIAL', 'SALA_COMERCIAL', 'LOJA', 'GALPAO', 'TERRENO', 'CHACARA',
)


def upgrade() -> None:
    op.create_table(
        'admins',
        sa.Column('id', sa.String(36), nullable=False),
        sa.Column('name', sa.String(60), nullable=False),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('password', sa.String(255), nullable=False),
        sa.Column('level', sa.Integer(), nullable=False, server_default='2'),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.CheckConstraint('level BETWEEN 1 AND 5', name='ck_admins_level'),
    )
    op.create_index('ix_admins_email', 'admins', ['email'], unique=True)

    op.create_table(
        'landlords',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(60), nullable=False),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('password', sa.String(255), nullable=False),
        sa.Column('phone', sa.String(20), nullable=True),
        sa.Column('city', sa.String(60), nullable=True),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_landlords_email', 'landlords', ['email'], unique=True)

    op.create_table(
        'properties',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('title', sa.String(100), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('address', sa.String(255), nullable=False),
        sa.Column('city', sa.String(60), nullable=False),
        sa.Column('neighborhood', sa.String(60), nullable=True),
        sa.Column('postal_code', sa.String(10), nullable=True),
        sa.Column('type', sa.Enum(*PROPERTY_TYPES, name='property_type'), nullable=False),
        sa.Column('monthly_rent', sa.Numeric(precision=10, scale=2), nullable=False),
        sa.Column('available', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('photos', sa.Text(), nullable=True),
        sa.Column('landlord_id', sa.Integer(), nullable=False),
        sa.Column('admin_id', sa.String(36), nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['landlord_id'], ['landlords.id'], name='fk_properties_landlord_id'),
        sa.ForeignKeyConstraint(['admin_id'], ['admins.id'], name='fk_properties_admin_id'),
        sa.CheckConstraint('monthly_rent > 0', name='ck_properties_monthly_rent'),
    )
    op.create_index('ix_properties_city', 'properties', ['city'])
    op.create_index('ix_properties_type', 'properties', ['type'])
    op.create_index('ix_properties_available', 'properties', ['available'])
    op.create_index('ix_properties_landlord_id', 'properties', ['landlord_id'])
    op.create_index('ix_properties_admin_id', 'properties', ['admin_id'])

    op.create_table(
        'audit_logs',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('description', sa.String(120), nullable=False),
        sa.Column('detail', sa.String(255), nullable=True),
        sa.Column('admin_id', sa.String(36), nullable=True),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['admin_id'], ['admins.id'], name='fk_audit_logs_admin_id'),
    )
    op.create_index('ix_audit_logs_admin_id', 'audit_logs', ['admin_id'])


def downgrade() -> None:
    op.drop_index('ix_audit_logs_admin_id', table_name='audit_logs')
    op.drop_table('audit_logs')
    for index in ('admin_id', 'landlord_id', 'available', 'type', 'city'):
        op.drop_index(f'ix_properties_{index}', table_name='properties')
    op.drop_table('properties')
    sa.Enum(name='property_type').drop(op.get_bind(), checkfirst=True)
    op.drop_index('ix_landlords_email', table_name='landlords')
    op.drop_table('landlords')
    op.drop_index('ix_admins_email', table_name='admins')
    op.drop_table('admins')
