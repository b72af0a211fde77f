import logging

from django.http import HttpResponse
from django.shortcuts import render
from django.views import View
from rest_framework import status
from rest_framework.exceptions import ParseError, UnsupportedMediaType
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from chatpoll.services.constant import RESULTS_PAGE_NO_POST_ID, RESULTS_PAGE_TITLE
from chatpoll.services.results import PollResult, aggregate_results
from chatpoll.services.router import dispatch_events

logger = logging.getLogger(__name__)


def _acknowledge():
    return HttpResponse("OK", content_type="text/plain", status=status.HTTP_200_OK)


class HealthCheckView(APIView):
    def get(self, request):
        return Response({"message": "Service is healthy", "status": "ok", "code": 200}, status=status.HTTP_200_OK)


class WebhookView(APIView):
    # Callers are not authenticated: the endpoint only accepts LINE webhook deliveries.
    authentication_classes: list = []
    permission_classes = [AllowAny]

    def post(self, request):
        # The platform's connectivity check may arrive without a body.
        if not request.body:
            return _acknowledge()
        try:
            data = request.data
        except (ParseError, UnsupportedMediaType):
            logger.warning("Webhook body is not a JSON document, acknowledging without processing")
            return _acknowledge()

        events = data.get("events") if isinstance(data, dict) else None
        if not isinstance(events, list):
            logger.warning("Webhook body has no events list, acknowledging without processing")
            return _acknowledge()

        logger.info(f"Received webhook delivery with {len(events)} event(s)")
        dispatch_events(events)
        return _acknowledge()


class PollResultView(View):
    def get(self, request):
        post_id = request.GET.get("postId")
        results = aggregate_results(post_id) if post_id else PollResult()
        return render(
            request,
            "chatpoll/results.html",
            {
                "title": RESULTS_PAGE_TITLE,
                "post_id": post_id or RESULTS_PAGE_NO_POST_ID,
                "results": results,
            },
        )
