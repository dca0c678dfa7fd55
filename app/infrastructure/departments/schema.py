"""
Database schema and initialization for the departments table.

The unique index on lower(name) is the storage-level guard for the
case-insensitive name invariant. Concurrent writers that both pass the
service's existence check are stopped here.
"""

import logging

from sqlalchemy import (
    Column,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    func,
    insert,
    select,
)
from sqlalchemy.engine import Engine

from app.domain.departments.entities import DESCRIPTION_MAX_LENGTH, NAME_MAX_LENGTH

logger = logging.getLogger(__name__)

metadata = MetaData()

departments = Table(
    "departments",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(NAME_MAX_LENGTH), nullable=False),
    Column(
        "description",
        String(DESCRIPTION_MAX_LENGTH),
        nullable=False,
        server_default="",
    ),
    sqlite_autoincrement=True,
)

Index("ux_departments_lower_name", func.lower(departments.c.name), unique=True)

SAMPLE_DEPARTMENTS = (
    ("Human Resources", "HR operations and employee management"),
    ("Information Technology", "IT infrastructure and software development"),
    ("Finance", "Financial planning and accounting"),
)


def create_schema(engine: Engine) -> None:
    """Create the departments table and its indexes if missing."""
    metadata.create_all(engine)
    logger.info("Department schema ready on %s", engine.url.render_as_string())


def seed_sample_departments(engine: Engine) -> int:
    """Insert the sample departments when the table is empty.

    Returns:
        Number of rows inserted (0 if the table already had data).
    """
    with engine.begin() as conn:
        count = conn.execute(select(func.count()).select_from(departments)).scalar()
        if count:
            logger.info("Departments table already has %d rows, skipping seed.", count)
            return 0

        conn.execute(
            insert(departments),
            [
                {"name": name, "description": description}
                for name, description in SAMPLE_DEPARTMENTS
            ],
        )

    logger.info("Seeded %d sample departments.", len(SAMPLE_DEPARTMENTS))
    return len(SAMPLE_DEPARTMENTS)
