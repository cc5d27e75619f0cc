import logging

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware:
    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        response = self.get_response(request)

        # DRF copies the authenticated user back onto the Django request
        user = getattr(request, 'user', None)
        actor_id = user.pk if user is not None and user.is_authenticated else None

        logger.info(f"{request.method} {request.path} -> {response.status_code} (actor={actor_id})")
        return response
