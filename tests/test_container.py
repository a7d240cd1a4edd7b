"""
Tests for the DependencyContainer.
"""

from file_explorer.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from file_explorer.use_cases.files.list_directory import ListDirectoryUseCase


class TestDependencyContainer:
    """Test cases for the DependencyContainer."""

    def test_file_repository_is_shared(self, dependency_container):
        repository = dependency_container.get_file_repository()

        assert isinstance(repository, LocalFileSystemAdapter)
        assert dependency_container.get_file_repository() is repository

    def test_use_cases_are_cached(self, dependency_container):
        use_case = dependency_container.get_list_directory_use_case()

        assert isinstance(use_case, ListDirectoryUseCase)
        assert dependency_container.get_list_directory_use_case() is use_case

    def test_registry_is_cached(self, dependency_container):
        registry = dependency_container.get_command_registry()
        assert dependency_container.get_command_registry() is registry

    def test_reset(self, dependency_container):
        registry = dependency_container.get_command_registry()

        dependency_container.reset()

        assert dependency_container.get_command_registry() is not registry
