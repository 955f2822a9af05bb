"""
db/queries.py
-------------
Every SQL statement the visitor repository runs, plus its fixed success messages.
Statements use psycopg2 `%s` placeholders; values are always passed as parameters.
"""

from models.visitor import VisitorColumn

CREATE_TABLE = """
    CREATE TABLE IF NOT EXISTS visitors (
        id              SERIAL PRIMARY KEY,
        name            TEXT NOT NULL,
        age             INT NOT NULL,
        date_of_visit   DATE NOT NULL,
        time_of_visit   TIME NOT NULL,
        assistant       TEXT NOT NULL,
        comments        TEXT NOT NULL
    );
"""

ADD_NEW_VISITOR = """
    INSERT INTO visitors (name, age, date_of_visit, time_of_visit, assistant, comments)
    VALUES (%s, %s, %s, %s, %s, %s)
    RETURNING *;
"""

LIST_ALL_VISITORS = "SELECT id, name FROM visitors;"

VIEW_VISITOR = "SELECT * FROM visitors WHERE id = %s;"

VIEW_LAST_VISITOR = "SELECT * FROM visitors ORDER BY id DESC LIMIT 1;"

DELETE_VISITOR = "DELETE FROM visitors WHERE id = %s;"

DELETE_ALL_VISITORS = "DELETE FROM visitors;"

_UPDATE_VISITOR = {
    column: f"UPDATE visitors SET {column.value} = %s WHERE id = %s;"
    for column in VisitorColumn
}


def update_visitor(column: VisitorColumn) -> str:
    """Return the single-column update statement for `column`, taking (new_value, id)."""
    return _UPDATE_VISITOR[VisitorColumn(column)]


# ── Success messages ──────────────────────────────────────
TABLE_CREATED = "Visitors table created successfully."
ALL_VISITORS_DELETED = "All visitors deleted successfully."


def visitor_deleted(visitor_id) -> str:
    return f"Visitor with {visitor_id} deleted successfully."
