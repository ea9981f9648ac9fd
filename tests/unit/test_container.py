"""
Unit tests for the DI container
"""
import pytest

from blog_backend.application.use_cases.auth.login_user import LoginUserUseCase
from blog_backend.application.use_cases.auth.logout_user import LogoutUserUseCase
from blog_backend.application.use_cases.post import DeletePostUseCase, ListPostsUseCase
from blog_backend.di.base_container import BaseContainer
from blog_backend.di.container import build_use_case_container


class TestBaseContainer:

    def test_singleton_returns_same_instance(self):
        container = BaseContainer()
        marker = object()
        container.register_singleton("thing", marker)
        assert container.get("thing") is marker

    def test_factory_builds_each_time(self):
        container = BaseContainer()
        container.register_factory("thing", object)
        assert container.get("thing") is not container.get("thing")

    def test_unknown_key_raises(self):
        with pytest.raises(KeyError):
            BaseContainer().get("missing")


class TestUseCaseContainer:

    def test_use_cases_get_the_given_repositories(self, user_repo, post_repo):
        container = build_use_case_container(user_repo, post_repo)

        assert container.get(LoginUserUseCase).user_repository is user_repo
        assert container.get(ListPostsUseCase).post_repository is post_repo
        assert container.get(DeletePostUseCase).post_repository is post_repo
        assert isinstance(container.get(LogoutUserUseCase), LogoutUserUseCase)
