PROJECT_NAME = "Bookcase"

API_V1_STR = "/api/v1"
