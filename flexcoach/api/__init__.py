from fastapi import APIRouter, FastAPI
import importlib, pkgutil, logging

logger = logging.getLogger(__name__)

# 이 패키지(root)
PACKAGE_NAME = __name__


def include_all_routers(app: FastAPI) -> None:
    """
    flexcoach/api 하위 모듈을 이름순으로 스캔해서
    각 모듈의 ROUTERS(list[APIRouter])를 app에 include.
    ROUTERS가 없는 모듈은 건너뛴다.
    """
    package = importlib.import_module(PACKAGE_NAME)

    for modinfo in sorted(pkgutil.iter_modules(package.__path__), key=lambda m: m.name):
        # _ 로 시작하는 내부 모듈은 무시
        if modinfo.name.startswith("_"):
            continue

        module = importlib.import_module(f"{PACKAGE_NAME}.{modinfo.name}")
        routers = getattr(module, "ROUTERS", None)
        if not isinstance(routers, (list, tuple)):
            continue

        for r in routers:
            if isinstance(r, APIRouter):
                app.include_router(r)
                logger.debug(f"router included: {modinfo.name} ({r.prefix or '/'})")
