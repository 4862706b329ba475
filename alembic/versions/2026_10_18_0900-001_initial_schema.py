"""Initial schema: users, athlete/professional profiles, health, performance,
anthropometric measurements, reports, integration connections

Revision ID: 001
Revises:
Create Date: 2026-10-18 09:00:00.000000

"""
from typing import Sequence, Union

import sqlalchemy as sa
import sqlmodel
from alembic import op

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

SKINFOLD_SITES = ("triceps", "subscapular", "biceps", "iliac", "supraspinal", "abdominal", "thigh", "calf")
PERIMETER_SITES = ("arm", "forearm", "chest", "waist", "hip", "thigh", "calf")


def _timestamps() -> list:
    return [
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
    ]


def upgrade() -> None:
    """Create all tables."""
    op.create_table('users', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column('email', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column('hashed_password', sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column('role', sqlmodel.sql.sqltypes.AutoString(length=20), nullable=False),
        sa.Column('language', sqlmodel.sql.sqltypes.AutoString(length=10), nullable=False, server_default='en'),
        sa.Column('theme', sqlmodel.sql.sqltypes.AutoString(length=10), nullable=False, server_default='light'),
        sa.Column('notify_email', sa.Boolean(), nullable=False, server_default='true'),
        sa.Column('notify_push', sa.Boolean(), nullable=False, server_default='true'),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default='true'),
        sa.Column('last_login', sa.DateTime(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_users_email'), 'users', ['email'], unique=True)
    op.create_index(op.f('ix_users_role'), 'users', ['role'], unique=False)

    op.create_table('athlete_profiles', sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('gender', sqlmodel.sql.sqltypes.AutoString(length=10), nullable=False),
        sa.Column('age', sa.Integer(), nullable=False),
        sa.Column('country', sqlmodel.sql.sqltypes.AutoString(length=100), nullable=False),
        sa.Column('sport', sqlmodel.sql.sqltypes.AutoString(length=100), nullable=True),
        sa.Column('position', sqlmodel.sql.sqltypes.AutoString(length=100), nullable=True),
        sa.Column('professional_id', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.ForeignKeyConstraint(['professional_id'], ['users.id']),
        sa.PrimaryKeyConstraint('user_id'))
    op.create_index(op.f('ix_athlete_profiles_professional_id'), 'athlete_profiles', ['professional_id'],
                    unique=False)

    op.create_table('professional_profiles', sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('specialization', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column('license_number', sqlmodel.sql.sqltypes.AutoString(length=100), nullable=False),
        sa.Column('years_of_experience', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.PrimaryKeyConstraint('user_id'))

    op.create_table('health_metrics', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('date', sa.DateTime(), nullable=False),
        sa.Column('sleep_duration', sa.Float(), nullable=True),
        sa.Column('sleep_quality', sa.Float(), nullable=True),
        sa.Column('deep_sleep', sa.Float(), nullable=True),
        sa.Column('light_sleep', sa.Float(), nullable=True),
        sa.Column('rem_sleep', sa.Float(), nullable=True),
        sa.Column('stress', sa.Float(), nullable=True),
        sa.Column('resting_heart_rate', sa.Float(), nullable=True),
        sa.Column('heart_rate_variability', sa.Float(), nullable=True),
        sa.Column('steps', sa.Float(), nullable=True),
        sa.Column('source', sqlmodel.sql.sqltypes.AutoString(length=20), nullable=False),
        sa.Column('notes', sqlmodel.sql.sqltypes.AutoString(length=2000), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_health_metrics_user_id'), 'health_metrics', ['user_id'], unique=False)
    op.create_index(op.f('ix_health_metrics_date'), 'health_metrics', ['date'], unique=False)
    op.create_index(op.f('ix_health_metrics_source'), 'health_metrics', ['source'], unique=False)

    op.create_table('performance_metrics', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('professional_id', sa.Integer(), nullable=False),
        sa.Column('date', sa.DateTime(), nullable=False),
        sa.Column('vo2max', sa.Float(), nullable=True),
        sa.Column('power', sa.Float(), nullable=True),
        sa.Column('speed', sa.Float(), nullable=True),
        sa.Column('training_load', sa.Float(), nullable=True),
        sa.Column('sport', sqlmodel.sql.sqltypes.AutoString(length=100), nullable=True),
        sa.Column('position', sqlmodel.sql.sqltypes.AutoString(length=100), nullable=True),
        sa.Column('notes', sqlmodel.sql.sqltypes.AutoString(length=2000), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.ForeignKeyConstraint(['professional_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_performance_metrics_user_id'), 'performance_metrics', ['user_id'], unique=False)
    op.create_index(op.f('ix_performance_metrics_professional_id'), 'performance_metrics', ['professional_id'],
                    unique=False)
    op.create_index(op.f('ix_performance_metrics_date'), 'performance_metrics', ['date'], unique=False)
    op.create_index(op.f('ix_performance_metrics_sport'), 'performance_metrics', ['sport'], unique=False)

    op.create_table('anthropometric_measurements', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('professional_id', sa.Integer(), nullable=False),
        sa.Column('date', sa.DateTime(), nullable=False),
        sa.Column('weight', sa.Float(), nullable=False),
        sa.Column('height', sa.Float(), nullable=False),
        *[sa.Column(f'skinfold_{site}', sa.Float(), nullable=True) for site in SKINFOLD_SITES],
        *[sa.Column(f'perimeter_{site}', sa.Float(), nullable=True) for site in PERIMETER_SITES],
        sa.Column('body_fat_percentage', sa.Float(), nullable=True),
        sa.Column('lean_mass', sa.Float(), nullable=True),
        sa.Column('notes', sqlmodel.sql.sqltypes.AutoString(length=2000), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.ForeignKeyConstraint(['professional_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_anthropometric_measurements_user_id'), 'anthropometric_measurements', ['user_id'],
                    unique=False)
    op.create_index(op.f('ix_anthropometric_measurements_professional_id'), 'anthropometric_measurements',
                    ['professional_id'], unique=False)
    op.create_index(op.f('ix_anthropometric_measurements_date'), 'anthropometric_measurements', ['date'],
                    unique=False)

    # user_id has no foreign key: reports outlive a deleted patient
    op.create_table('reports', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('professional_id', sa.Integer(), nullable=False),
        sa.Column('type', sqlmodel.sql.sqltypes.AutoString(length=20), nullable=False),
        sa.Column('format', sqlmodel.sql.sqltypes.AutoString(length=20), nullable=False),
        sa.Column('date', sa.DateTime(), nullable=False),
        sa.Column('content', sa.JSON(), nullable=False),
        sa.Column('shared', sa.Boolean(), nullable=False, server_default='false'),
        sa.Column('access_code', sqlmodel.sql.sqltypes.AutoString(length=64), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['professional_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_reports_user_id'), 'reports', ['user_id'], unique=False)
    op.create_index(op.f('ix_reports_professional_id'), 'reports', ['professional_id'], unique=False)
    op.create_index(op.f('ix_reports_date'), 'reports', ['date'], unique=False)
    op.create_index(op.f('ix_reports_access_code'), 'reports', ['access_code'], unique=True)

    op.create_table('integration_connections', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('provider', sqlmodel.sql.sqltypes.AutoString(length=20), nullable=False),
        sa.Column('connected', sa.Boolean(), nullable=False, server_default='false'),
        sa.Column('last_sync', sa.DateTime(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id', 'provider', name='uq_integration_user_provider'))
    op.create_index(op.f('ix_integration_connections_user_id'), 'integration_connections', ['user_id'],
                    unique=False)


def downgrade() -> None:
    """Drop all tables."""
    op.drop_index(op.f('ix_integration_connections_user_id'), table_name='integration_connections')
    op.drop_table('integration_connections')

    for index in ('access_code', 'date', 'professional_id', 'user_id'):
        op.drop_index(op.f(f'ix_reports_{index}'), table_name='reports')
    op.drop_table('reports')

    for index in ('date', 'professional_id', 'user_id'):
        op.drop_index(op.f(f'ix_anthropometric_measurements_{index}'), table_name='anthropometric_measurements')
    op.drop_table('anthropometric_measurements')

    for index in ('sport', 'date', 'professional_id', 'user_id'):
        op.drop_index(op.f(f'ix_performance_metrics_{index}'), table_name='performance_metrics')
    op.drop_table('performance_metrics')

    for index in ('source', 'date', 'user_id'):
        op.drop_index(op.f(f'ix_health_metrics_{index}'), table_name='health_metrics')
    op.drop_table('health_metrics')

    op.drop_table('professional_profiles')
    op.drop_index(op.f('ix_athlete_profiles_professional_id'), table_name='athlete_profiles')
    op.drop_table('athlete_profiles')

    op.drop_index(op.f('ix_users_role'), table_name='users')
    op.drop_index(op.f('ix_users_email'), table_name='users')
    op.drop_table('users')
