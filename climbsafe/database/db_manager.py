"""
File: db_manager.py
Purpose: Manages the MySQL connection pool and executes queries for the DAOs.
"""
import logging

import mysql.connector
from mysql.connector import pooling

logger = logging.getLogger(__name__)


class DBManager:
    """
    Handles database connections via a lazily created connection pool.

    One instance is built by the application factory from the app config and
    handed to every DAO that needs it.
    """

    def __init__(self, db_config, pool_name="climbsafe_pool", pool_size=5):
        self.db_config = db_config
        self.pool_name = pool_name
        self.pool_size = pool_size
        self._connection_pool = None

    def _initialize_pool(self):
        """Creates the connection pool on first use."""
        if self._connection_pool is None:
            self._connection_pool = pooling.MySQLConnectionPool(
                pool_name=self.pool_name,
                pool_size=self.pool_size,
                pool_reset_session=True,
                **self.db_config
            )
            logger.info("Connection pool %s created (size=%d)", self.pool_name, self.pool_size)
        return self._connection_pool

    def get_connection(self):
        """Retrieves a connection from the pool."""
        try:
            return self._initialize_pool().get_connection()
        except mysql.connector.Error:
            logger.exception("Error getting connection from %s", self.pool_name)
            raise

    def execute_query(self, query, params=None):
        """Executes INSERT, UPDATE, or DELETE queries and returns the result/rowcount."""
        connection = None
        cursor = None

        try:
            connection = self.get_connection()
            cursor = connection.cursor(dictionary=True)
            cursor.execute(query, params or ())

            if query.strip().upper().startswith("SELECT"):
                return cursor.fetchall()

            connection.commit()
            # If it was an INSERT, return the ID as well
            if query.strip().upper().startswith("INSERT"):
                return {'rowcount': cursor.rowcount, 'lastrowid': cursor.lastrowid}
            return cursor.rowcount

        except mysql.connector.Error:
            logger.exception("Query failed: %s", query.strip().splitlines()[0])
            if connection:
                connection.rollback()
            raise

        finally:
            if cursor:
                cursor.close()
            if connection:
                connection.close()

    def fetch_all(self, query, params=None):
        """Executes a SELECT query and returns all rows as a list of dictionaries."""
        connection = self.get_connection()
        cursor = connection.cursor(dictionary=True)
        try:
            cursor.execute(query, params or ())
            return cursor.fetchall()
        finally:
            cursor.close()
            connection.close()

    def fetch_one(self, query, params=None):
        """Executes a SELECT query and returns a single row."""
        connection = self.get_connection()
        cursor = connection.cursor(dictionary=True)
        try:
            cursor.execute(query, params or ())
            return cursor.fetchone()
        finally:
            cursor.close()
            connection.close()

    def execute_sql_script(self, file_path):
        """Parses and executes a multi-statement SQL script file. Returns the statement count."""
        logger.info("Reading SQL script: %s", file_path)
        with open(file_path, 'r', encoding='utf-8') as f:
            sql_script = f.read()

        connection = self.get_connection()
        cursor = connection.cursor()
        try:
            count = 0
            # Split by semicolon, skipping empty statements
            for statement in sql_script.split(';'):
                if statement.strip():
                    cursor.execute(statement)
                    count += 1

            connection.commit()
            logger.info("Executed %d SQL statements from %s", count, file_path)
            return count

        except mysql.connector.Error:
            logger.exception("Error executing SQL script %s", file_path)
            connection.rollback()
            raise

        finally:
            cursor.close()
            connection.close()
