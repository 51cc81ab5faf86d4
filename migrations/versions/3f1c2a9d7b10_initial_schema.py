"""initial schema: patients, reminders, measurements

Revision ID: 3f1c2a9d7b10
Revises:
Create Date: 2026-10-19 17:20:00.000000
"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '3f1c2a9d7b10'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'doctors',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=120), nullable=False),
        sa.Column('access_code', sa.String(length=64), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_doctors_access_code', 'doctors', ['access_code'], unique=True)

    op.create_table(
        'patients',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('doctor_id', sa.Integer(), nullable=True),
        sa.Column('name', sa.String(length=120), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('birthdate', sa.Date(), nullable=True),
        sa.Column('gender', sa.String(length=1), nullable=True),
        sa.Column('height', sa.Integer(), nullable=True),
        sa.Column('weight', sa.Float(), nullable=True),
        sa.Column('created_at', sa.DateTime(), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=False),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=False),
        sa.ForeignKeyConstraint(['doctor_id'], ['doctors.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_patients_email', 'patients', ['email'], unique=True)
    op.create_index('ix_patients_doctor_id', 'patients', ['doctor_id'])

    op.create_table(
        'relevant_conditions',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=120), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('name'),
    )
    op.create_table(
        'medications',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=120), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('name'),
    )

    op.create_table(
        'patient_relevant_conditions',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('patient_id', sa.String(length=36), nullable=False),
        sa.Column('relevant_condition_id', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['patient_id'], ['patients.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['relevant_condition_id'], ['relevant_conditions.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('patient_id', 'relevant_condition_id', name='uq_patient_relevant_condition'),
    )
    op.create_index('ix_patient_relevant_conditions_patient_id', 'patient_relevant_conditions', ['patient_id'])
    op.create_index('ix_patient_relevant_conditions_relevant_condition_id', 'patient_relevant_conditions',
                    ['relevant_condition_id'])

    op.create_table(
        'patient_medications',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('patient_id', sa.String(length=36), nullable=False),
        sa.Column('medication_id', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['patient_id'], ['patients.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['medication_id'], ['medications.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('patient_id', 'medication_id', name='uq_patient_medication'),
    )
    op.create_index('ix_patient_medications_patient_id', 'patient_medications', ['patient_id'])
    op.create_index('ix_patient_medications_medication_id', 'patient_medications', ['medication_id'])

    op.create_table(
        'notifications',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('patient_id', sa.String(length=36), nullable=False),
        sa.Column('title', sa.String(length=70), nullable=False),
        sa.Column('type', sa.String(length=20), nullable=False),
        sa.Column('start_date', sa.DateTime(), nullable=False),
        sa.Column('repeat_interval', sa.Integer(), server_default='0', nullable=False),
        sa.Column('additional_notes', sa.String(length=255), nullable=False),
        sa.Column('push_token', sa.String(length=255), nullable=True),
        sa.Column('created_at', sa.DateTime(), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=False),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=False),
        sa.ForeignKeyConstraint(['patient_id'], ['patients.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_notifications_patient_id', 'notifications', ['patient_id'])
    op.create_index('ix_notifications_start_date', 'notifications', ['start_date'])

    op.create_table(
        'tags',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=60), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('name'),
    )
    op.create_table(
        'measurements',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('patient_id', sa.String(length=36), nullable=False),
        sa.Column('systolic_pressure', sa.Integer(), nullable=False),
        sa.Column('diastolic_pressure', sa.Integer(), nullable=False),
        sa.Column('heart_rate', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=False),
        sa.ForeignKeyConstraint(['patient_id'], ['patients.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_measurements_patient_id', 'measurements', ['patient_id'])
    op.create_index('ix_measurements_created_at', 'measurements', ['created_at'])

    op.create_table(
        'measurement_tags',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('measurement_id', sa.Integer(), nullable=False),
        sa.Column('tag_id', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['measurement_id'], ['measurements.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['tag_id'], ['tags.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('measurement_id', 'tag_id', name='uq_measurement_tag'),
    )
    op.create_index('ix_measurement_tags_measurement_id', 'measurement_tags', ['measurement_id'])
    op.create_index('ix_measurement_tags_tag_id', 'measurement_tags', ['tag_id'])


def downgrade():
    op.drop_table('measurement_tags')
    op.drop_table('measurements')
    op.drop_table('tags')
    op.drop_table('notifications')
    op.drop_table('patient_medications')
    op.drop_table('patient_relevant_conditions')
    op.drop_table('medications')
    op.drop_table('relevant_conditions')
    op.drop_table('patients')
    op.drop_table('doctors')
