from .director_record_mapper import DirectorRecordMapper
from .movie_record_mapper import MovieRecordMapper
from .studio_record_mapper import StudioRecordMapper

__all__ = ["DirectorRecordMapper", "MovieRecordMapper", "StudioRecordMapper"]
