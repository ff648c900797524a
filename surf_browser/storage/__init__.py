# Storage - 히스토리/북마크 파일 저장소
from .persistence_store import PersistenceStore, encode_records, decode_records

__all__ = ['PersistenceStore', 'encode_records', 'decode_records']
