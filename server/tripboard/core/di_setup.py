"""
Dependency Injection Setup
===========================

Registers all dependencies (repositories, services, realtime handler) in the DI container.
"""

from .di_container import DIContainer

_is_initialized = False

def setup_dependencies():
    """Register all dependencies in the container."""
    global _is_initialized

    container = DIContainer.get_instance()
    if _is_initialized:
        return container

    # Import repository interfaces
    from ..repo.interfaces import (
        MemberInterface,
        DestinationInterface,
        CategoryInterface,
        PlanInterface,
        PlaceInterface
    )

    # Import repository implementations
    from ..repo.implementations import (
        MemberRepository,
        DestinationRepository,
        CategoryRepository,
        PlanRepository,
        PlaceRepository
    )

    # Import services
    from ..service.plan_service import PlanService
    from ..service.place_service import PlaceService

    # Import realtime adapter
    from ..realtime.hub import PlanShareHub
    from ..realtime.place_share_handler import PlaceShareHandler

    # Register repository implementations
    container.register(MemberInterface.__name__, MemberRepository())
    container.register(DestinationInterface.__name__, DestinationRepository())
    container.register(CategoryInterface.__name__, CategoryRepository())
    container.register(PlanInterface.__name__, PlanRepository())
    container.register(PlaceInterface.__name__, PlaceRepository())

    # One hub per process; sessions from every request share it
    container.register(PlanShareHub.__name__, PlanShareHub())

    # Register services with factory functions for proper DI
    def create_plan_service(container):
        plan_repo = container.resolve(PlanInterface.__name__)
        destination_repo = container.resolve(DestinationInterface.__name__)
        member_repo = container.resolve(MemberInterface.__name__)
        return PlanService(plan_repo, destination_repo, member_repo)

    def create_place_service(container):
        place_repo = container.resolve(PlaceInterface.__name__)
        plan_repo = container.resolve(PlanInterface.__name__)
        category_repo = container.resolve(CategoryInterface.__name__)
        plan_service = container.resolve(PlanService.__name__)
        return PlaceService(place_repo, plan_repo, category_repo, plan_service)

    def create_place_share_handler(container):
        place_service = container.resolve(PlaceService.__name__)
        hub = container.resolve(PlanShareHub.__name__)
        return PlaceShareHandler(place_service, hub)

    container.register(PlanService.__name__, create_plan_service)
    container.register(PlaceService.__name__, create_place_service)
    container.register(PlaceShareHandler.__name__, create_place_share_handler)

    _is_initialized = True
    return container

# Initialize the dependency injection system
def init_di():
    """Initialize the dependency injection system.
    Call this function from your application's entry point."""
    return setup_dependencies()
