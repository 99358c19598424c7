from io import StringIO

import pytest
from django.core.management import call_command
from django.core.management.base import CommandError

from studylog.data.models import StudyLog


@pytest.mark.django_db
def test_seed_replaces_only_that_users_logs(alice_id, bob_id):
    StudyLog.objects.create(user_id=alice_id, title="old", minutes=5, date="2026-01-01")
    StudyLog.objects.create(user_id=bob_id, title="bob's", minutes=5, date="2026-01-01")
    out = StringIO()

    call_command("seed_study_logs", user_id=alice_id, stdout=out)

    titles = set(StudyLog.objects.filter(user_id=alice_id).values_list("title", flat=True))
    assert "old" not in titles
    assert len(titles) == 7
    assert StudyLog.objects.filter(user_id=bob_id).count() == 1
    assert "Seeded 7 log(s)" in out.getvalue()


@pytest.mark.django_db
def test_seed_with_missing_file(alice_id):
    with pytest.raises(CommandError):
        call_command("seed_study_logs", user_id=alice_id, file="nope.json", stdout=StringIO())
