from household_budget.utils.utils import get_project_root


def test_project_root_contains_package() -> None:
    assert (get_project_root() / "household_budget" / "__init__.py").is_file()
