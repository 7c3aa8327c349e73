"""Tests for pandas -> numpy numeric conversion."""
from decimal import Decimal

import numpy as np
import pandas as pd

from ml_glue.data.converter import DataConverter


class TestConvertToFloat:
    def test_numbers(self):
        assert DataConverter.convert_to_float(3) == 3.0
        assert DataConverter.convert_to_float(2.5) == 2.5
        assert DataConverter.convert_to_float(np.int32(7)) == 7.0
        assert DataConverter.convert_to_float(Decimal('1.25')) == 1.25

    def test_missing_values_become_nan(self):
        assert np.isnan(DataConverter.convert_to_float(None))
        assert np.isnan(DataConverter.convert_to_float(pd.NA))
        assert np.isnan(DataConverter.convert_to_float(pd.NaT))

    def test_strings(self):
        assert DataConverter.convert_to_float('4.5') == 4.5
        assert DataConverter.convert_to_float('-1e3') == -1000.0
        assert np.isnan(DataConverter.convert_to_float('abc'))
        assert np.isnan(DataConverter.convert_to_float(''))

    def test_other_types_become_nan(self):
        assert np.isnan(DataConverter.convert_to_float(True))
        assert np.isnan(DataConverter.convert_to_float(1 + 2j))
        assert np.isnan(DataConverter.convert_to_float(object()))
        assert np.isnan(DataConverter.convert_to_float([1, 2]))


class TestToNumericVector:
    def test_float_series(self):
        s = pd.Series([1.0, 2.0, 3.5])
        out = DataConverter.to_numeric_vector(s)
        assert out.dtype == np.float64
        assert np.array_equal(out, [1.0, 2.0, 3.5])

    def test_int_series(self):
        out = DataConverter.to_numeric_vector(pd.Series([1, 2, 3]))
        assert out.dtype == np.float64
        assert np.array_equal(out, [1.0, 2.0, 3.0])

    def test_nullable_int_series(self):
        s = pd.Series([1, None, 3], dtype='Int64')
        out = DataConverter.to_numeric_vector(s)
        assert out[0] == 1.0 and out[2] == 3.0
        assert np.isnan(out[1])

    def test_mixed_object_series(self):
        s = pd.Series([1, '2.5', None, 'abc', True])
        out = DataConverter.to_numeric_vector(s)
        assert out[0] == 1.0
        assert out[1] == 2.5
        assert np.isnan(out[2:]).all()

    def test_bool_series_is_not_numeric(self):
        out = DataConverter.to_numeric_vector(pd.Series([True, False]))
        assert np.isnan(out).all()

    def test_list_and_array_inputs(self):
        assert np.array_equal(DataConverter.to_numeric_vector([1, 2]), [1.0, 2.0])
        assert np.array_equal(DataConverter.to_numeric_vector(np.array([4, 5])), [4.0, 5.0])
        assert DataConverter.to_numeric_vector([]).shape == (0,)


class TestToIntVector:
    def test_int_series(self):
        out = DataConverter.to_int_vector(pd.Series([1, 2, 3]))
        assert out.dtype == np.int64
        assert np.array_equal(out, [1, 2, 3])

    def test_unconvertible_values_become_zero(self):
        s = pd.Series(['12', 'x', None, 3.9, -3.9, np.nan, '1.5', True])
        out = DataConverter.to_int_vector(s)
        assert out.tolist() == [12, 0, 0, 3, -3, 0, 0, 0]

    def test_nullable_int_missing_becomes_zero(self):
        s = pd.Series([5, None], dtype='Int64')
        assert DataConverter.to_int_vector(s).tolist() == [5, 0]

    def test_float_series_truncates(self):
        out = DataConverter.to_int_vector(pd.Series([1.9, -0.5, np.inf]))
        assert out.tolist() == [1, 0, 0]


class TestToNumericMatrix:
    def test_shape_and_values(self):
        df = pd.DataFrame({
            'a': [1, 2, 3],
            'b': ['4', 'five', None],
            'c': [0.5, 1.5, 2.5],
        })
        out = DataConverter.to_numeric_matrix(df)
        assert out.shape == (3, 3)
        assert out[:, 0].tolist() == [1.0, 2.0, 3.0]
        assert out[0, 1] == 4.0
        assert np.isnan(out[1, 1]) and np.isnan(out[2, 1])
        assert out[:, 2].tolist() == [0.5, 1.5, 2.5]

    def test_column_order_is_preserved(self):
        df = pd.DataFrame({'z': [1.0], 'a': [2.0]})
        assert DataConverter.to_numeric_matrix(df).tolist() == [[1.0, 2.0]]

    def test_zero_width(self):
        df = pd.DataFrame(index=range(4))
        assert DataConverter.to_numeric_matrix(df).shape == (4, 0)

    def test_array_inputs(self):
        assert DataConverter.to_numeric_matrix(np.array([[1, 2], [3, 4]])).tolist() == [[1.0, 2.0], [3.0, 4.0]]
        assert DataConverter.to_numeric_matrix([1, 2, 3]).shape == (3, 1)
        assert DataConverter.to_numeric_matrix([[1, 'x'], [2, '3']]).tolist()[1] == [2.0, 3.0]


class TestConvertToInt:
    def test_numbers_truncate_toward_zero(self):
        assert DataConverter.convert_to_int(7) == 7
        assert DataConverter.convert_to_int(2.9) == 2
        assert DataConverter.convert_to_int(-2.9) == -2
        assert DataConverter.convert_to_int(Decimal('4.5')) == 4

    def test_defaults_to_zero(self):
        assert DataConverter.convert_to_int(None) == 0
        assert DataConverter.convert_to_int('abc') == 0
        assert DataConverter.convert_to_int(float('nan')) == 0
        assert DataConverter.convert_to_int(float('inf')) == 0
        assert DataConverter.convert_to_int(True) == 0
        assert DataConverter.convert_to_int(object()) == 0

    def test_integer_strings(self):
        assert DataConverter.convert_to_int('42') == 42
        assert DataConverter.convert_to_int('-3') == -3

    def test_out_of_int64_range_becomes_zero(self):
        assert DataConverter.convert_to_int('99999999999999999999') == 0
        assert DataConverter.convert_to_int(1e30) == 0
        assert DataConverter.convert_to_int(-1e30) == 0
        assert DataConverter.convert_to_int(2 ** 63) == 0
        assert DataConverter.convert_to_int(2 ** 63 - 1) == 2 ** 63 - 1


class TestToIntVectorRange:
    def test_huge_string(self):
        s = pd.Series(['99999999999999999999', '3'], dtype=object)
        assert DataConverter.to_int_vector(s).tolist() == [0, 3]

    def test_huge_float(self):
        assert DataConverter.to_int_vector(pd.Series([1e30, 2.0])).tolist() == [0, 2]

    def test_unsigned_beyond_int64(self):
        s = pd.Series(np.array([2 ** 64 - 1, 5], dtype=np.uint64))
        assert DataConverter.to_int_vector(s).tolist() == [0, 5]
