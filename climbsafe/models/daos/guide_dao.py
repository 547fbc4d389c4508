"""
File: guide_dao.py
Purpose: Data Access Object persisting Guide records in the `guides` table.
"""
from climbsafe.models.entities.guide import Guide


class GuideDAO:
    """
    Persistence collaborator for the GuideRegistry.

    Every write raises on failure (see DBManager.execute_query) so the
    registry can leave its in-memory state untouched.
    """

    def __init__(self, db_manager):
        self.db = db_manager

    @staticmethod
    def _to_guide(row):
        return Guide(
            email=row['email'],
            password=row['password'],
            name=row['name'],
            emergency_contact=row['emergency_contact']
        )

    def get_all_guides(self):
        """Loads every stored guide, ordered by email."""
        query = "SELECT email, password, name, emergency_contact FROM guides ORDER BY email"
        rows = self.db.fetch_all(query)
        return [self._to_guide(row) for row in rows or []]

    def insert_guide(self, guide):
        query = """
            INSERT INTO guides (email, password, name, emergency_contact)
            VALUES (%s, %s, %s, %s)
        """
        params = (guide.email, guide.password, guide.name, guide.emergency_contact)
        return self.db.execute_query(query, params)

    def update_guide(self, guide):
        query = """
            UPDATE guides
            SET password = %s, name = %s, emergency_contact = %s
            WHERE email = %s
        """
        params = (guide.password, guide.name, guide.emergency_contact, guide.email)
        return self.db.execute_query(query, params)

    def delete_guide(self, email):
        query = "DELETE FROM guides WHERE email = %s"
        return self.db.execute_query(query, (email,))
