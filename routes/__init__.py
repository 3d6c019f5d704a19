from utils.router import Router
from . import holydays, kjv, meta


def build_router():
    """Route table; order matters, the first matching pattern wins."""
    router = Router()
    router.add('/kjv/get_verse', kjv.get_verse, methods=['POST'])
    router.add('/kjv/get_chapter', kjv.get_chapter, methods=['POST'])
    router.add('/kjv/get_passage', kjv.get_passage, methods=['POST'])
    router.add('/kjv/*/*/*', kjv.get_verse_by_path)
    router.add('/holydays/*', holydays.get_holy_days)
    router.add('/easter/*/*', holydays.get_easter_range)
    router.add('/routes', meta.list_routes)
    router.add('/health', meta.health)
    return router
