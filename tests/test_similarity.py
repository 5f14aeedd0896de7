from api.requests import Developer, DeveloperMetrics
from engine.comparison.similarity import find_similar_developers, matching_areas, similarity


def test_self_similarity_is_100(user1_metrics):
    (match,) = find_similar_developers(user1_metrics, [Developer(id="me", name="Me", metrics=user1_metrics)])
    assert match.similarity == 100
    assert match.matching_areas == [
        "Commit Frequency",
        "Pr Velocity",
        "Issue Resolution Rate",
        "Code Review Participation",
        "Code Quality Score",
    ]


def test_all_zero_profiles():
    zero = DeveloperMetrics()
    assert similarity(zero, zero) == 100
    assert matching_areas(zero, zero) == []


def test_sorted_and_limited(user1_metrics, user2_metrics):
    far = DeveloperMetrics(downloads=1)
    candidates = [
        Developer(id="far", name="Far", metrics=far),
        Developer(id="near", name="Near", metrics=user2_metrics),
        Developer(id="same", name="Same", metrics=user1_metrics),
    ]
    results = find_similar_developers(user1_metrics, candidates, limit=2)
    assert [r.developer.id for r in results] == ["same", "near"]
    assert results[0].similarity > results[1].similarity
    assert find_similar_developers(user1_metrics, candidates, limit=0) == []


def test_single_metric_distance():
    a = DeveloperMetrics(repo_stars=100)
    b = DeveloperMetrics(repo_stars=50)
    # one metric at distance 0.5, seventeen identical
    assert similarity(a, b) == round((1 - 0.5 / 18) * 100)
    assert matching_areas(a, b) == []
