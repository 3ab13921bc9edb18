"""create profiles, students, faculty and feedback tables

Revision ID: 0001
Revises:
Create Date: 2026-10-18 09:00:00

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '0001'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        'profiles',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('role', sa.String(length=20), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_profiles')),
    )
    op.create_index(op.f('ix_profiles_role'), 'profiles', ['role'], unique=False)

    op.create_table(
        'students',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('enrollment_number', sa.String(length=100), nullable=True),
        sa.ForeignKeyConstraint(['id'], ['profiles.id'], name=op.f('fk_students_id_profiles'), ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_students')),
    )

    op.create_table(
        'faculty',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('department', sa.String(length=255), nullable=True),
        sa.ForeignKeyConstraint(['id'], ['profiles.id'], name=op.f('fk_faculty_id_profiles'), ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_faculty')),
    )
    op.create_index(op.f('ix_faculty_name'), 'faculty', ['name'], unique=False)

    op.create_table(
        'feedback',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('student_id', sa.Uuid(), nullable=False),
        sa.Column('faculty_id', sa.Uuid(), nullable=False),
        sa.Column('feedback_text', sa.Text(), nullable=False),
        sa.Column('sentiment', sa.String(length=20), nullable=False),
        sa.Column('sentiment_score', sa.Integer(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(['student_id'], ['students.id'], name=op.f('fk_feedback_student_id_students'), ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['faculty_id'], ['faculty.id'], name=op.f('fk_feedback_faculty_id_faculty'), ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_feedback')),
    )
    op.create_index(op.f('ix_feedback_student_id'), 'feedback', ['student_id'], unique=False)
    op.create_index(op.f('ix_feedback_faculty_id'), 'feedback', ['faculty_id'], unique=False)
    op.create_index(op.f('ix_feedback_sentiment'), 'feedback', ['sentiment'], unique=False)
    op.create_index(op.f('ix_feedback_created_at'), 'feedback', ['created_at'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_feedback_created_at'), table_name='feedback')
    op.drop_index(op.f('ix_feedback_sentiment'), table_name='feedback')
    op.drop_index(op.f('ix_feedback_faculty_id'), table_name='feedback')
    op.drop_index(op.f('ix_feedback_student_id'), table_name='feedback')
    op.drop_table('feedback')
    op.drop_table('faculty')
    op.drop_index(op.f('ix_profiles_role'), table_name='profiles')
    op.drop_table('students')
    op.drop_table('profiles')
