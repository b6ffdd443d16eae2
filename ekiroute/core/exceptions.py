# custom exception 정의 및 관리


class EkiRouteException(Exception):  # 예외 구조 정의
    def __init__(self, message: str, code: str = "INTERNAL_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)


class DatasetLoadError(EkiRouteException):
    def __init__(self, message: str = "철도 데이터셋을 읽을 수 없습니다"):
        super().__init__(message, code="DATASET_LOAD_ERROR")


class RouteNotFoundException(EkiRouteException):
    def __init__(self, message: str = "경로를 찾을 수 없습니다"):
        super().__init__(message, code="ROUTE_NOT_FOUND")


class StationNotFoundException(EkiRouteException):
    def __init__(self, message: str = "역을 찾을 수 없습니다"):
        super().__init__(message, code="STATION_NOT_FOUND")


class InvalidLineSelectionException(EkiRouteException):
    def __init__(self, message: str = "선택할 수 없는 노선입니다"):
        super().__init__(message, code="INVALID_LINE_SELECTION")
