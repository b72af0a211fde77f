from dataclasses import dataclass

from django.db.models import Count

from ..models import Answer, AnswerValue


@dataclass(frozen=True)
class PollResult:
    ok: int = 0
    ng: int = 0


def aggregate_results(post_id: str) -> PollResult:
    """
    Count OK and NG answers for a poll post.

    Runs one grouped query over the poll_post_id index, so the cost grows with the answers to this
    post, not with the whole answer table. Values other than OK/NG are not counted.
    """
    counts = {
        row["answer_value"]: row["count"]
        for row in Answer.objects.filter(poll_post_id=post_id)
        .values("answer_value")
        .annotate(count=Count("answer_id"))
        .order_by()
    }
    return PollResult(ok=counts.get(AnswerValue.OK.value, 0), ng=counts.get(AnswerValue.NG.value, 0))
