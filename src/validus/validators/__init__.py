"""
Contains the typed validator families and one ready-made instance per supported value type. All numeric and
temporal instances are plain `ComparisonValidator`s.
"""
import datetime as dt
import decimal

from validus import rules

from .collection import CollectionValidator
from .comparison import ComparisonValidator
from .equality import EqualityValidator
from .guid import GuidValidator
from .string import StringValidator

DateTime: ComparisonValidator[dt.datetime] = ComparisonValidator(dt.datetime, domain=rules.naive)
"""naive datetime validators"""
DateTimeOffset: ComparisonValidator[dt.datetime] = ComparisonValidator(dt.datetime, domain=rules.aware)
"""timezone aware datetime validators"""
Decimal: ComparisonValidator[decimal.Decimal] = ComparisonValidator(decimal.Decimal | int)
"""decimal validators, int operands are accepted like float validators accept them"""
Float: ComparisonValidator[float] = ComparisonValidator(float)
"""float validators"""
Guid = GuidValidator()
"""uuid validators"""
Int: ComparisonValidator[int] = ComparisonValidator(int)
"""int validators"""
Int16: ComparisonValidator[int] = ComparisonValidator(int)
"""16 bit int validators"""
Int64: ComparisonValidator[int] = ComparisonValidator(int)
"""64 bit int validators"""
String = StringValidator()
"""string validators"""
TimeSpan: ComparisonValidator[dt.timedelta] = ComparisonValidator(dt.timedelta)
"""timedelta validators"""
Collection: CollectionValidator = CollectionValidator()
"""collection validators"""
