from rest_framework import status
from rest_framework.exceptions import APIException


class Unauthorized(APIException):
    # not a NotAuthenticated subclass, so DRF keeps the 401 for signed-in actors too
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "You are not allowed to perform this action."
    default_code = 'unauthorized'
