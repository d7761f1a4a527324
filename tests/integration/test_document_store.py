"""Integration tests for the local document store."""

import pytest

from folio.contexts.document.exceptions import InvalidDocumentError
from folio.contexts.document.schema import Experience
from folio.contexts.document.store import load_document, save_document


@pytest.mark.integration
def test_save_and_load(tmp_path, sample_resume):
    path = save_document(sample_resume, "classic", tmp_path / "nested" / "resume.yaml")
    stored = load_document(path)

    assert stored.variant_id == "classic"
    assert stored.resume == sample_resume
    assert stored.resume.experience[0].start_date == "2020-01"
    assert stored.resume.education[0].gpa == "3.8"
    assert stored.resume.personal_info.zip_code == "94105"


@pytest.mark.integration
def test_saved_file_uses_contract_keys(tmp_path, sample_resume):
    path = save_document(sample_resume, "modern", tmp_path / "resume.yaml")
    text = path.read_text()

    assert "document:" in text
    assert "template: modern" in text
    assert "personalInfo:" in text
    assert "startDate:" in text


@pytest.mark.integration
def test_save_replaces_whole_document(tmp_path, sample_resume):
    path = tmp_path / "resume.yaml"
    save_document(sample_resume, "modern", path)

    sample_resume.replace_section("experience", [Experience(id="x", position="Only job")])
    save_document(sample_resume, "minimal", path)

    stored = load_document(path)
    assert [e.position for e in stored.resume.experience] == ["Only job"]
    assert stored.variant_id == "minimal"
    assert list(tmp_path.iterdir()) == [path]


@pytest.mark.integration
def test_unknown_variant_is_kept_as_saved(tmp_path, sample_resume):
    path = save_document(sample_resume, "retro", tmp_path / "resume.yaml")
    assert load_document(path).variant_id == "retro"


@pytest.mark.integration
def test_missing_file_returns_sample(tmp_path):
    stored = load_document(tmp_path / "absent.yaml")
    assert stored.variant_id is None
    assert stored.resume.personal_info.first_name == "John"


@pytest.mark.integration
@pytest.mark.parametrize(
    "content",
    ["resume: {}\n", "document:\n  template: modern\n", "document: [unclosed\n"],
)
def test_invalid_documents_raise(tmp_path, content):
    path = tmp_path / "resume.yaml"
    path.write_text(content)
    with pytest.raises(InvalidDocumentError):
        load_document(path)
