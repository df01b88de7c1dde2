from dependency_injector import containers, providers
from sqlalchemy.orm import Session

from cinetheque.application.movies.mappers import (
    DirectorRecordMapper,
    MovieRecordMapper,
    StudioRecordMapper,
)
from cinetheque.application.movies.services import DirectorService, MovieService, StudioService
from cinetheque.infrastructure.common.unit_of_work import SQLAlchemyUnitOfWork
from cinetheque.infrastructure.movies.repositories import (
    DirectorRepository,
    MovieRepository,
    StudioRepository,
)


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Declare db as a dependency that will be provided at runtime
    db = providers.Dependency(instance_of=Session)

    # Transactional scope, one per service; scopes on the same session nest
    unit_of_work = providers.Factory(SQLAlchemyUnitOfWork, session=db)

    # Repositories
    director_repository = providers.Factory(DirectorRepository, db=db)
    movie_repository = providers.Factory(MovieRepository, db=db)
    studio_repository = providers.Factory(StudioRepository, db=db)

    # Record mappers (stateless)
    movie_record_mapper = providers.Singleton(MovieRecordMapper)
    director_record_mapper = providers.Singleton(
        DirectorRecordMapper, movie_mapper=movie_record_mapper
    )
    studio_record_mapper = providers.Singleton(
        StudioRecordMapper, director_mapper=director_record_mapper
    )

    # Application services
    movie_service = providers.Factory(
        MovieService,
        uow=unit_of_work,
        movie_repository=movie_repository,
        director_repository=director_repository,
        movie_mapper=movie_record_mapper,
    )
    director_service = providers.Factory(
        DirectorService,
        uow=unit_of_work,
        director_repository=director_repository,
        director_mapper=director_record_mapper,
        movie_service=movie_service,
    )
    studio_service = providers.Factory(
        StudioService,
        uow=unit_of_work,
        studio_repository=studio_repository,
        director_repository=director_repository,
        studio_mapper=studio_record_mapper,
    )


container = Container()
