"""
Coach Running IA - TCX / Markdown Export Tests
"""
import pytest
import sys
import os
from datetime import date, datetime
from xml.etree import ElementTree

# srcディレクトリをパスに追加
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from src.export import (
    create_md_download,
    generate_markdown,
    generate_session_tcx,
    generate_tcx,
    list_plan_sessions,
    markdown_filename,
    sanitize_filename,
    session_label,
    session_tcx_filename,
    tcx_filename,
)
from src.export.tcx import parse_duration_seconds, session_intensity
from src.plan import Session, TrainingPlan, Week

TCX_NS = "{http://www.garmin.com/xmlschemas/TrainingCenterDatabase/v2}"


@pytest.fixture
def plan():
    """テスト用プラン"""
    return TrainingPlan(
        id="plan-1",
        name="Semi de Lyon",
        created_at=datetime(2025, 1, 1),
        race_date=date(2025, 4, 6),
        weeks=(
            Week(
                week_number=1,
                theme="Reprise",
                sessions=(
                    Session(
                        id="a", day="Mardi", type="Jogging", duration="45 min",
                        intensity="Modéré", title="Footing <progressif>",
                        warmup="10' lent", main_set="30' & accélérations", cooldown="5' marche",
                        advice="Bois bien",
                    ),
                    Session(id="b", day="Jeudi", type="Récupération", duration="30 mn", title="Récup"),
                ),
            ),
            Week(
                week_number=2,
                theme="",
                sessions=(
                    Session(id="c", day="Dimanche", type="Sortie Longue", duration="1h30",
                            intensity="Facile", title="Sortie longue"),
                ),
            ),
        ),
    )


class TestParseDuration:
    """parse_duration_seconds関数のテスト"""

    def test_minutes(self):
        assert parse_duration_seconds("45 min") == 2700
        assert parse_duration_seconds("Footing 50mn") == 3000

    def test_hours(self):
        """最初の数値+単位のみ使用"""
        assert parse_duration_seconds("1h30") == 3600
        assert parse_duration_seconds("2 h") == 7200

    def test_default(self):
        assert parse_duration_seconds("") == 3600
        assert parse_duration_seconds("libre") == 3600
        assert parse_duration_seconds(None) == 3600


class TestGenerateTcx:
    """generate_tcx関数のテスト"""

    def test_valid_xml(self, plan):
        root = ElementTree.fromstring(generate_tcx(plan))
        workouts = root.findall(f"{TCX_NS}Workouts/{TCX_NS}Workout")

        assert len(workouts) == 3
        assert workouts[0].find(f"{TCX_NS}Name").text == "S1 - Footing <progressif>"
        assert workouts[2].find(f"{TCX_NS}Name").text == "S2 - Sortie longue"

    def test_durations(self, plan):
        root = ElementTree.fromstring(generate_tcx(plan))
        seconds = [el.text for el in root.iter(f"{TCX_NS}Seconds")]
        assert seconds == ["2700", "1800", "3600"]

    def test_escaping(self, plan):
        content = generate_tcx(plan)
        assert "Footing &lt;progressif&gt;" in content
        assert "30' &amp; accélérations" in content

    def test_intensity(self, plan):
        sessions = [s for w in plan.weeks for s in w.sessions]
        assert [session_intensity(s) for s in sessions] == ["Active", "Resting", "Resting"]

    def test_empty_plan(self):
        root = ElementTree.fromstring(generate_tcx(TrainingPlan(id="p", name="Vide")))
        assert root.findall(f"{TCX_NS}Workouts/{TCX_NS}Workout") == []

    def test_session_tcx(self, plan):
        session = plan.weeks[0].sessions[1]
        root = ElementTree.fromstring(generate_session_tcx(session, 1))

        assert root.find(f"{TCX_NS}Workouts/{TCX_NS}Workout/{TCX_NS}Name").text == "S1 - Récup"
        # 単一セッションは常にActive
        assert next(root.iter(f"{TCX_NS}Intensity")).text == "Active"


class TestMarkdown:
    """generate_markdown関数のテスト"""

    def test_structure(self, plan):
        content = generate_markdown(plan)

        assert content.startswith("# 🏃 Semi de Lyon\n")
        assert "**Date de course :** 06/04/2025" in content
        assert "**Durée :** 2 semaines" in content
        assert "## Semaine 1 - Reprise" in content
        assert "## Semaine 2\n" in content
        assert "### Mardi - Footing <progressif>" in content
        assert "- **Échauffement :** 10' lent" in content

    def test_optional_fields_skipped(self, plan):
        content = generate_markdown(plan)
        section = content.split("### Jeudi - Récup")[1].split("##")[0]
        assert "Échauffement" not in section
        assert "- **Séance :** " in section

    def test_paces(self, plan):
        content = generate_markdown(plan, paces={"Seuil": "4'45\"/km"})
        assert "## 📊 Mes allures" in content
        assert "- **Seuil :** 4'45\"/km" in content

    def test_download_bytes(self, plan):
        assert create_md_download(generate_markdown(plan)).decode("utf-8") == generate_markdown(plan)


class TestFilenames:
    """ファイル名のテスト"""

    def test_sanitize(self):
        assert sanitize_filename("Semi de Lyon") == "Semi_de_Lyon"
        assert sanitize_filename("  10 km / Paris ") == "10_km_Paris"
        assert sanitize_filename("???") == "plan"

    def test_tcx_filenames(self, plan):
        assert tcx_filename(plan, "coros") == "Semi_de_Lyon_coros.tcx"
        assert session_tcx_filename(plan.weeks[0].sessions[0], 1) == "S1_Footing_progressif.tcx"

    def test_markdown_filename(self, plan):
        assert markdown_filename(plan) == "Semi_de_Lyon.md"


class TestSessionSelection:
    """セッション単位のTCX出力用ヘルパーのテスト"""

    def test_list_plan_sessions(self, plan):
        sessions = list_plan_sessions(plan)

        assert [(week, s.id) for week, s in sessions] == [(1, "a"), (1, "b"), (2, "c")]

    def test_empty_plan(self):
        assert list_plan_sessions(TrainingPlan(id="p", name="Vide", weeks=None)) == []

    def test_session_label(self, plan):
        week_number, session = list_plan_sessions(plan)[2]
        assert session_label(week_number, session) == "S2 · Dimanche · Sortie longue"
        assert session_label(3, Session(id="x", day="Lundi", type="Jogging")) == "S3 · Lundi · Jogging"

    def test_selected_session_export(self, plan):
        week_number, session = list_plan_sessions(plan)[2]
        root = ElementTree.fromstring(generate_session_tcx(session, week_number))

        assert root.find(f"{TCX_NS}Workouts/{TCX_NS}Workout/{TCX_NS}Name").text == "S2 - Sortie longue"
        assert session_tcx_filename(session, week_number) == "S2_Sortie_longue.tcx"
