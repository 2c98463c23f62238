from scanintake.extraction.extractor import SubjectExtractor, build_subject_extractor

__all__ = ["SubjectExtractor", "build_subject_extractor"]
