import pytest

from create_interwoven_app.core.naming import to_camel_case, to_kebab_case, to_pascal_case


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("myProjectName", "my-project-name"),
        ("MY_PROJECT_NAME", "my-project-name"),
        ("  spaced out  name ", "spaced-out-name"),
        ("my-app!", "my-app"),
        ("--edge--", "edge"),
        ("", ""),
        (None, ""),
        (42, ""),
    ],
)
def test_to_kebab_case(value: object, expected: str) -> None:
    assert to_kebab_case(value) == expected


def test_to_pascal_case_joins_segments() -> None:
    assert to_pascal_case("my-project-name") == "MyProjectName"
    assert to_pascal_case("my_project name") == "MyProjectName"
    assert to_pascal_case("app.v2") == "Appv2"


def test_to_pascal_case_keeps_existing_capitals() -> None:
    assert to_pascal_case("MY_PROJECT_NAME") == "MYPROJECTNAME"
    assert to_pascal_case("myAPI") == "MyAPI"


def test_to_pascal_case_rejects_non_strings() -> None:
    assert to_pascal_case(None) == ""
    assert to_pascal_case("") == ""


@pytest.mark.parametrize("value", ["my-project-name", "MY_PROJECT_NAME", "hello world", "x", "9lives", "@scope/pkg"])
def test_camel_case_is_pascal_with_lowercase_first_letter(value: str) -> None:
    pascal = to_pascal_case(value)
    camel = to_camel_case(value)
    assert camel == pascal[:1].lower() + pascal[1:]
    assert camel[:1] == camel[:1].lower()


def test_to_camel_case_examples() -> None:
    assert to_camel_case("my-project-name") == "myProjectName"
    assert to_camel_case(None) == ""


@pytest.mark.parametrize("value", ["my-app", "interwoven-kit-demo", "dapp"])
def test_kebab_pascal_round_trip(value: str) -> None:
    assert to_kebab_case(to_pascal_case(value)) == value
