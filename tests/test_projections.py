"""
Tests for projections and SQL function calls.
"""

from search_api.models import Member
from shared.utils.schemas import MemberDto, UserDto


class TestProjections:
    def test_single_column(self, member_repository, seed_members):
        assert member_repository.find_usernames() == [
            "member1", "member2", "member3", "member4",
        ]

    def test_tuples(self, member_repository, seed_members):
        assert member_repository.find_username_age_pairs() == [
            ("member1", 10),
            ("member2", 20),
            ("member3", 30),
            ("member4", 40),
        ]

    def test_member_dtos(self, member_repository, seed_members):
        result = member_repository.find_member_dtos()

        assert result[0] == MemberDto(username="member1", age=10)
        assert [dto.age for dto in result] == [10, 20, 30, 40]

    def test_user_dtos_use_renamed_field_and_subquery(self, member_repository, seed_members):
        """``name`` comes from username; ``age`` is the oldest member's age on every row."""
        result = member_repository.find_user_dtos()

        assert result == [
            UserDto(name="member1", age=40),
            UserDto(name="member2", age=40),
            UserDto(name="member3", age=40),
            UserDto(name="member4", age=40),
        ]

    def test_empty_table(self, member_repository, db_session):
        assert member_repository.find_usernames() == []
        assert member_repository.find_member_dtos() == []


class TestSqlFunctions:
    def test_replace(self, member_repository, seed_members):
        assert member_repository.find_usernames_replaced("member", "M") == [
            "M1", "M2", "M3", "M4",
        ]

    def test_lowercase_usernames(self, member_repository, db_session, seed_members):
        db_session.add(Member("MemberX", 60))
        db_session.commit()

        result = member_repository.find_lowercase_usernames()

        assert result == ["member1", "member2", "member3", "member4"]
