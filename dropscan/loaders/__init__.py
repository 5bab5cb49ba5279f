from .csv_loader import CsvRowSource, strip_comments

__all__ = ['CsvRowSource', 'strip_comments']
