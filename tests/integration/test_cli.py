from pathlib import Path
from unittest.mock import patch

import pytest
from fake_backend import FakeBackend, has_field
from typer.testing import CliRunner

from scanintake.client.api_client import IntakeApiClient
from scanintake.main import app

runner = CliRunner()


@pytest.fixture
def fake_api(backend: FakeBackend):  # type: ignore[no-untyped-def]
    def make_client(settings: object) -> IntakeApiClient:
        return IntakeApiClient(base_url="http://intake.test", transport=backend.transport)

    with patch("scanintake.main._api_client", side_effect=make_client):
        yield backend


class TestSubjectCommand:
    def test_prints_subject_from_pdf(self, tmp_path: Path, subject_pdf_bytes: bytes) -> None:
        pdf = tmp_path / "memo.pdf"
        pdf.write_bytes(subject_pdf_bytes)

        result = runner.invoke(app, ["subject", str(pdf)])

        assert result.exit_code == 0
        assert "Budget Report" in result.output

    def test_exits_non_zero_without_subject(
        self, tmp_path: Path, no_subject_pdf_bytes: bytes
    ) -> None:
        pdf = tmp_path / "minutes.pdf"
        pdf.write_bytes(no_subject_pdf_bytes)

        result = runner.invoke(app, ["subject", str(pdf)])

        assert result.exit_code == 1


class TestDepartmentsCommand:
    def test_lists_departments(self, fake_api: FakeBackend) -> None:
        result = runner.invoke(app, ["departments", "--type", "admin"])

        assert result.exit_code == 0
        assert "d1\tExaminations\tResults, Schedule" in result.output
        assert fake_api.department_types == ["admin"]


class TestSubmitCommand:
    def _args(self, *extra: str) -> list[str]:
        return [
            "submit",
            "--department", "d2",
            "--category", "Fees",
            "--diary-no", "D-99",
            "--from", "Accounts Office",
            "--disposal", "Filed",
            "--status", "closed",
            *extra,
        ]

    def test_submits_pdf(
        self, tmp_path: Path, subject_pdf_bytes: bytes, fake_api: FakeBackend
    ) -> None:
        pdf = tmp_path / "memo.pdf"
        pdf.write_bytes(subject_pdf_bytes)

        result = runner.invoke(app, self._args("--file", str(pdf)))

        assert result.exit_code == 0
        body = fake_api.uploads[0]
        assert has_field(body, "subject", b"Budget Report")
        assert has_field(body, "status", b"closed")
        assert has_field(body, "diaryNo", b"D-99")

    def test_rejects_non_pdf_file(self, tmp_path: Path, fake_api: FakeBackend) -> None:
        doc = tmp_path / "memo.txt"
        doc.write_text("Subject: Not a PDF.")

        result = runner.invoke(app, self._args("--file", str(doc), "--subject", "x"))

        assert result.exit_code == 1
        assert fake_api.uploads == []

    def test_requires_exactly_one_source(self, fake_api: FakeBackend) -> None:
        result = runner.invoke(app, self._args())

        assert result.exit_code != 0
        assert fake_api.uploads == []

    def test_rejects_unknown_category(
        self, tmp_path: Path, subject_pdf_bytes: bytes, fake_api: FakeBackend
    ) -> None:
        pdf = tmp_path / "memo.pdf"
        pdf.write_bytes(subject_pdf_bytes)
        args = self._args("--file", str(pdf))
        args[args.index("Fees")] = "Results"

        result = runner.invoke(app, args)

        assert result.exit_code != 0
        assert fake_api.uploads == []

    def test_sends_given_date(
        self, tmp_path: Path, subject_pdf_bytes: bytes, fake_api: FakeBackend
    ) -> None:
        pdf = tmp_path / "memo.pdf"
        pdf.write_bytes(subject_pdf_bytes)

        result = runner.invoke(app, self._args("--file", str(pdf), "--date", "2024-05-01"))

        assert result.exit_code == 0
        assert has_field(fake_api.uploads[0], "date", b"2024-05-01")

    def test_rejects_non_iso_date(
        self, tmp_path: Path, subject_pdf_bytes: bytes, fake_api: FakeBackend
    ) -> None:
        pdf = tmp_path / "memo.pdf"
        pdf.write_bytes(subject_pdf_bytes)

        result = runner.invoke(app, self._args("--file", str(pdf), "--date", "next tuesday"))

        assert result.exit_code != 0
        assert fake_api.uploads == []
