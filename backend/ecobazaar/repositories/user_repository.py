"""
User Repository - Data Access Layer for Users

Sellers, customers and admins all live in the users table.

Author: EcoBazaar
Date: 2025-11-03
"""
from typing import List, Optional

from ecobazaar.domain.user import User, Role
from ecobazaar.core.database import get_db_connection_dict_with_retry

USER_SELECT = """
    SELECT
        id, username, email, first_name, last_name, role,
        eco_points, is_active, created_at, updated_at
    FROM users
"""


class UserRepository:
    """
    Repository for User data access

    Passwords are never selected.
    """

    @staticmethod
    def _map_row_to_user(row: dict) -> User:
        return User(
            id=row['id'],
            username=row['username'],
            email=row.get('email'),
            first_name=row.get('first_name'),
            last_name=row.get('last_name'),
            role=Role(row['role']),
            eco_points=row.get('eco_points') or 0,
            is_active=bool(row['is_active']),
            created_at=row['created_at'],
            updated_at=row.get('updated_at'),
        )

    def find_by_id(self, user_id: int) -> Optional[User]:
        """
        Find user by ID

        Returns:
            User or None if not found
        """
        conn = get_db_connection_dict_with_retry()
        cursor = conn.cursor()

        try:
            cursor.execute(USER_SELECT + " WHERE id = %s", (user_id,))

            row = cursor.fetchone()
            if not row:
                return None

            return self._map_row_to_user(row)

        finally:
            cursor.close()
            conn.close()

    def find_by_role(self, role: Optional[Role] = None, is_active: Optional[bool] = None) -> List[User]:
        """
        Find users, optionally restricted to one role and/or active status

        Returns:
            Users ordered by ID
        """
        conn = get_db_connection_dict_with_retry()
        cursor = conn.cursor()

        try:
            where_clause, params = self._build_filters(role, is_active)

            cursor.execute(f"""
                {USER_SELECT}
                WHERE {where_clause}
                ORDER BY id
            """, params)

            return [self._map_row_to_user(row) for row in cursor.fetchall()]

        finally:
            cursor.close()
            conn.close()

    def find_recent_by_role(self, role: Role, limit: int) -> List[User]:
        """
        Most recently registered users of a role

        Returns:
            Users ordered by created_at descending
        """
        conn = get_db_connection_dict_with_retry()
        cursor = conn.cursor()

        try:
            cursor.execute(f"""
                {USER_SELECT}
                WHERE role = %s
                ORDER BY created_at DESC
                LIMIT %s
            """, (role.value, limit))

            return [self._map_row_to_user(row) for row in cursor.fetchall()]

        finally:
            cursor.close()
            conn.close()

    def count_by_filters(self, role: Optional[Role] = None, is_active: Optional[bool] = None) -> int:
        """
        Count users matching filters

        Args:
            role: Filter by role
            is_active: Filter by approval status

        Returns:
            Count of matching users
        """
        conn = get_db_connection_dict_with_retry()
        cursor = conn.cursor()

        try:
            where_clause, params = self._build_filters(role, is_active)

            cursor.execute(f"""
                SELECT COUNT(*) as total
                FROM users
                WHERE {where_clause}
            """, params)

            return cursor.fetchone()['total']

        finally:
            cursor.close()
            conn.close()

    @staticmethod
    def _build_filters(role: Optional[Role], is_active: Optional[bool]):
        conditions = []
        params = []

        if role is not None:
            conditions.append("role = %s")
            params.append(role.value)

        if is_active is not None:
            conditions.append("is_active = %s")
            params.append(is_active)

        where_clause = " AND ".join(conditions) if conditions else "1=1"
        return where_clause, params
