from django.http import JsonResponse


def not_found(request, exception=None):
    """JSON 404 for paths outside the API routes"""
    return JsonResponse({"error": "Not found"}, status=404)


def server_error(request):
    return JsonResponse({"error": "Internal server error"}, status=500)
