from silence_reporter.models import Matcher, Section, Silence


def make_silence(index=0, state="active", comment="Test comment", matchers=None):
    if matchers is None:
        matchers = (Matcher(name="alertname", value=f"Alert{index}", is_regex=False, is_equal=True),)
    return Silence(
        id=f"silence-{index}",
        state=state,
        matchers=tuple(matchers),
        starts_at="2024-01-01T00:00:00Z",
        ends_at="2024-01-02T00:00:00.500Z",
        updated_at="2024-01-01T00:00:00Z",
        created_by=f"user-{index}",
        comment=comment,
    )


def silence_payload(**overrides):
    payload = {
        "id": "test-id-123",
        "status": {"state": "active"},
        "matchers": [
            {"name": "alertname", "value": "TestAlert", "isRegex": False, "isEqual": True},
        ],
        "startsAt": "2024-01-01T00:00:00Z",
        "endsAt": "2024-01-02T00:00:00Z",
        "updatedAt": "2024-01-01T00:00:00Z",
        "createdBy": "test-user",
        "comment": "Test comment",
    }
    payload.update(overrides)
    return payload


def sections(batch):
    return [b for b in batch.blocks if isinstance(b, Section)]
