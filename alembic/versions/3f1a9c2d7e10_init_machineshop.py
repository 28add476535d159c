"""init machineshop

Revision ID: 3f1a9c2d7e10
Revises:
Create Date: 2025-12-02 09:14:05.118204
"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = '3f1a9c2d7e10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # === usuarios ===
    op.create_table(
        'usuarios',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('nombre', sa.String(100), nullable=False),
        sa.Column('email', sa.String(100), nullable=False),
        sa.Column('password_hash', sa.String(255), nullable=False),
        sa.Column('area', sa.String(50)),
        sa.Column('rol', sa.String(50), nullable=False, server_default='Operador'),
        sa.Column('activo', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('creado_en', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP')),
    )
    op.create_index('ix_usuarios_id', 'usuarios', ['id'])
    op.create_index('ix_usuarios_email', 'usuarios', ['email'], unique=True)

    # === areas ===
    op.create_table(
        'areas',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('nombre_area', sa.String(100), nullable=False),
        sa.Column(
            'responsable_area_id', sa.Integer(),
            sa.ForeignKey('usuarios.id', ondelete='SET NULL'), nullable=True
        ),
    )

    # === piezas ===
    op.create_table(
        'piezas',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('nombre_pieza', sa.String(150), nullable=False),
        sa.Column('maquina', sa.String(100), nullable=False),
        sa.Column('id_area', sa.Integer(), sa.ForeignKey('areas.id'), nullable=False),
    )

    # === maquinas_ms ===
    op.create_table(
        'maquinas_ms',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('nombre', sa.String(100), nullable=False),
    )

    # === solicitudes ===
    op.create_table(
        'solicitudes',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            'solicitante_id', sa.Integer(),
            sa.ForeignKey('usuarios.id', ondelete='RESTRICT'), nullable=False
        ),
        sa.Column('id_pieza', sa.Integer(), sa.ForeignKey('piezas.id'), nullable=False),
        sa.Column('fecha_y_hora', sa.DateTime(), nullable=False),
        sa.Column('turno', sa.String(10), nullable=False),
        sa.Column('tipo', sa.String(50), nullable=False),
        sa.Column('detalles', sa.Text(), nullable=False),
        sa.Column('dibujo', sa.String(255)),
    )
    op.create_index('ix_solicitudes_solicitante_id', 'solicitudes', ['solicitante_id'])
    op.create_index('ix_solicitudes_id_pieza', 'solicitudes', ['id_pieza'])

    # === revisiones (1:1 con solicitudes) ===
    op.create_table(
        'revisiones',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('id_solicitud', sa.Integer(), sa.ForeignKey('solicitudes.id'), nullable=False),
        sa.Column('id_revisor', sa.Integer(), sa.ForeignKey('usuarios.id'), nullable=False),
        sa.Column('prioridad', sa.String(20), nullable=False),
        sa.Column('comentarios', sa.Text()),
        sa.Column('fecha_hora_revision', sa.DateTime(), nullable=False),
        sa.Column('version_id', sa.Integer(), nullable=False),
    )
    op.create_index('ix_revisiones_id_solicitud', 'revisiones', ['id_solicitud'], unique=True)

    # === estado_trabajo (historial de segmentos) ===
    op.create_table(
        'estado_trabajo',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('id_solicitud', sa.Integer(), sa.ForeignKey('solicitudes.id'), nullable=False),
        sa.Column(
            'id_maquinista', sa.Integer(),
            sa.ForeignKey('usuarios.id', ondelete='RESTRICT'), nullable=True
        ),
        sa.Column('descripcion_operacion', sa.String(150), nullable=False),
        sa.Column('maquina_asignada', sa.String(100), nullable=False, server_default=''),
        sa.Column('fecha_y_hora_de_inicio', sa.DateTime(), nullable=False),
        sa.Column('fecha_y_hora_de_fin', sa.DateTime()),
        sa.Column('tiempo_maquina', sa.Numeric(10, 2), nullable=False, server_default='0'),
        sa.Column('observaciones', sa.Text()),
    )
    op.create_index(
        'ix_estado_trabajo_solicitud_inicio', 'estado_trabajo',
        ['id_solicitud', 'fecha_y_hora_de_inicio']
    )


def downgrade() -> None:
    op.drop_index('ix_estado_trabajo_solicitud_inicio', table_name='estado_trabajo')
    op.drop_table('estado_trabajo')
    op.drop_index('ix_revisiones_id_solicitud', table_name='revisiones')
    op.drop_table('revisiones')
    op.drop_index('ix_solicitudes_id_pieza', table_name='solicitudes')
    op.drop_index('ix_solicitudes_solicitante_id', table_name='solicitudes')
    op.drop_table('solicitudes')
    op.drop_table('maquinas_ms')
    op.drop_table('piezas')
    op.drop_table('areas')
    op.drop_index('ix_usuarios_email', table_name='usuarios')
    op.drop_index('ix_usuarios_id', table_name='usuarios')
    op.drop_table('usuarios')
