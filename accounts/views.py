from rest_framework import status, viewsets
from rest_framework.decorators import action, api_view
from rest_framework.response import Response


@api_view(["GET"])
def health(request):
    """Liveness check for monitoring and CI."""
    return Response({"status": "ok"}, status=status.HTTP_200_OK)


class UserViewSet(viewsets.ViewSet):
    """
    ViewSet for the authenticated caller.
    """

    @action(detail=False, methods=["get"])
    def me(self, request):
        """
        Returns the identity resolved from the bearer token.
        """
        principal = request.principal
        return Response(
            {"id": principal.id, "email": principal.email}, status=status.HTTP_200_OK
        )
