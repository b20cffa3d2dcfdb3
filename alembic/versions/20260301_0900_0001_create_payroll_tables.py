from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '0001_create_payroll_tables'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'departments',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(50), nullable=False),
        sa.Column('location', sa.String(100)),
        sa.Column('manager_id', sa.Integer()),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False)
    )
    op.create_index('ix_departments_id', 'departments', ['id'])

    op.create_table(
        'employees',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('email', sa.String(100), unique=True),
        sa.Column('phone', sa.String(15)),
        sa.Column('hire_date', sa.Date(), nullable=False),
        sa.Column('department_id', sa.Integer(), sa.ForeignKey('departments.id'), nullable=False),
        sa.Column('designation', sa.String(50)),
        sa.Column('basic_salary', sa.Numeric(10, 2), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.CheckConstraint('basic_salary > 0', name='ck_employees_basic_salary_positive')
    )
    op.create_index('ix_employees_id', 'employees', ['id'])
    op.create_index('idx_emp_dept', 'employees', ['department_id'])
    op.create_index('idx_emp_email', 'employees', ['email'])
    op.create_index('idx_emp_hire_date', 'employees', ['hire_date'])

    op.create_table(
        'salary_details',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('employee_id', sa.Integer(), sa.ForeignKey('employees.id'), nullable=False),
        sa.Column('salary_month', sa.Integer(), nullable=False),
        sa.Column('salary_year', sa.Integer(), nullable=False),
        sa.Column('basic_salary', sa.Numeric(10, 2), nullable=False),
        sa.Column('hra', sa.Numeric(10, 2), nullable=False),
        sa.Column('bonus', sa.Numeric(10, 2), nullable=False),
        sa.Column('tax', sa.Numeric(10, 2), nullable=False),
        sa.Column('gross_salary', sa.Numeric(10, 2), nullable=False),
        sa.Column('net_salary', sa.Numeric(10, 2), nullable=False),
        sa.Column('pay_date', sa.DateTime(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.UniqueConstraint('employee_id', 'salary_month', 'salary_year',
                            name='uq_salary_details_employee_period'),
        sa.CheckConstraint('salary_month BETWEEN 1 AND 12', name='ck_salary_details_month_range')
    )
    op.create_index('ix_salary_details_id', 'salary_details', ['id'])
    op.create_index('idx_salary_emp', 'salary_details', ['employee_id'])
    op.create_index('idx_salary_month_year', 'salary_details', ['salary_month', 'salary_year'])
    op.create_index('idx_salary_composite', 'salary_details',
                    ['employee_id', 'salary_year', 'salary_month'])

    salary_change_type = sa.Enum('CREATE', 'UPDATE', name='salary_change_type')

    op.create_table(
        'salary_audit',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('employee_id', sa.Integer(), sa.ForeignKey('employees.id'), nullable=False),
        sa.Column('old_salary', sa.Numeric(10, 2)),
        sa.Column('new_salary', sa.Numeric(10, 2), nullable=False),
        sa.Column('changed_by', sa.String(100), nullable=False),
        sa.Column('change_date', sa.DateTime(), nullable=False),
        sa.Column('change_type', salary_change_type, nullable=False)
    )
    op.create_index('ix_salary_audit_id', 'salary_audit', ['id'])
    op.create_index('ix_salary_audit_employee_id', 'salary_audit', ['employee_id'])
    op.create_index('ix_salary_audit_change_date', 'salary_audit', ['change_date'])
    op.create_index('idx_salary_audit_employee_date', 'salary_audit',
                    ['employee_id', 'change_date'])


def downgrade():
    op.drop_table('salary_audit')
    sa.Enum(name='salary_change_type').drop(op.get_bind(), checkfirst=True)
    op.drop_table('salary_details')
    op.drop_table('employees')
    op.drop_table('departments')
