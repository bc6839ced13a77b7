import numpy as np
import pandas as pd
import pytest

from ess_prep.errors import MissingColumnError, SchemaError, UnknownCategoryError
from ess_prep.schema import ColumnKind, ColumnSpec, apply_schema, categorical, identifier, numeric
from ess_prep.tables import LabelledTable


def test_identifier_becomes_nullable_integer(raw_responses):
    typed = apply_schema(raw_responses, [identifier('idno')])
    assert typed.data['idno'].dtype == 'Int64'
    assert typed.data['idno'].tolist() == [102, 103, 104, 106]


def test_text_identifier_stays_text():
    table = LabelledTable(pd.DataFrame({'id': ['GB_1', 'GB_2']}))
    typed = apply_schema(table, [identifier('id')])
    assert typed.data['id'].dtype == 'string'


def test_identifier_with_missing_values_is_rejected():
    table = LabelledTable(pd.DataFrame({'idno': [1.0, np.nan]}), name='sample')
    with pytest.raises(SchemaError, match='missing'):
        apply_schema(table, [identifier('idno')])


def test_numeric_becomes_float64_with_na(raw_responses):
    typed = apply_schema(raw_responses, [numeric('cgtsday')])
    column = typed.data['cgtsday']

    assert column.dtype == 'Float64'
    assert column.isna().tolist() == [True, False, False, True]


def test_non_numeric_values_are_rejected():
    table = LabelledTable(pd.DataFrame({'agea': ['34', 'thirty']}), name='responses')
    with pytest.raises(SchemaError, match='thirty'):
        apply_schema(table, [numeric('agea')])


def test_categorical_codes_become_labels_in_code_order(raw_responses):
    typed = apply_schema(raw_responses, [categorical('gndr')])
    column = typed.data['gndr']

    assert isinstance(column.dtype, pd.CategoricalDtype)
    assert list(column.cat.categories) == ['Male', 'Female']
    assert column.tolist() == ['Female', 'Male', 'Male', 'Female']


def test_closed_category_set_is_used_as_order(raw_responses):
    order = ['I have never smoked', "I don't smoke now but I used to",
             'I have only smoked a few times', 'I smoke but not every day', 'I smoke daily']
    typed = apply_schema(raw_responses, [categorical('cgtsmke', order)])

    assert list(typed.data['cgtsmke'].cat.categories) == order


def test_label_outside_closed_set_is_rejected(raw_responses):
    with pytest.raises(UnknownCategoryError) as excinfo:
        apply_schema(raw_responses, [categorical('gndr', ['Male'])])
    assert excinfo.value.unknown == ['Female']


def test_code_without_value_label_is_rejected(raw_responses):
    df = raw_responses.data.copy()
    df.loc[0, 'gndr'] = 9.0
    table = raw_responses.with_data(df)

    with pytest.raises(SchemaError, match='without a value label'):
        apply_schema(table, [categorical('gndr')])


def test_unlabelled_text_categories_are_taken_from_data():
    table = LabelledTable(pd.DataFrame({'alcfreq': ['Never', None, 'Every day']}))
    typed = apply_schema(table, [categorical('alcfreq')])
    column = typed.data['alcfreq']

    assert list(column.cat.categories) == ['Every day', 'Never']
    assert pd.isna(column.iloc[1])


def test_already_labelled_values_pass_through(raw_responses):
    df = raw_responses.data.copy()
    df['gndr'] = ['Female', 'Male', 'Male', 'Female']
    typed = apply_schema(raw_responses.with_data(df), [categorical('gndr')])

    assert typed.data['gndr'].tolist() == ['Female', 'Male', 'Male', 'Female']


def test_undeclared_columns_are_untouched(raw_responses):
    typed = apply_schema(raw_responses, [identifier('idno')])
    assert typed.data['health'].dtype == raw_responses.data['health'].dtype


def test_declared_column_must_exist(raw_responses):
    with pytest.raises(MissingColumnError):
        apply_schema(raw_responses, [numeric('hinctnta')])


def test_categories_only_allowed_on_categorical_columns():
    with pytest.raises(SchemaError):
        ColumnSpec('agea', ColumnKind.NUMERIC, categories=('a',))


def test_declared_missing_codes_become_na(raw_responses):
    raw_responses.data.loc[1, 'alcwkdy'] = 7777.0
    raw_responses.value_labels['alcwkdy'] = {7777.0: 'Refusal', 8888.0: "Don't know"}

    typed = apply_schema(raw_responses, [numeric('alcwkdy', missing_codes=(6666, 7777, 8888, 9999))])
    column = typed.data['alcwkdy']

    assert column.dtype == 'Float64'
    assert pd.isna(column.iloc[1])
    assert column.iloc[0] == 7.0


def test_labelled_values_that_are_not_missing_codes_are_kept():
    # 0 and 10 are the labelled endpoints of the left-right scale
    table = LabelledTable(
        pd.DataFrame({'lrscale': [0.0, 10.0, 88.0]}),
        value_labels={'lrscale': {0.0: 'Left', 10.0: 'Right', 88.0: "Don't know"}},
        name='responses',
    )

    typed = apply_schema(table, [numeric('lrscale', missing_codes=(77, 88, 99))])

    assert typed.data['lrscale'].iloc[0] == 0.0
    assert typed.data['lrscale'].iloc[1] == 10.0
    assert pd.isna(typed.data['lrscale'].iloc[2])


def test_categorical_missing_codes_become_na(raw_responses):
    raw_responses.data.loc[0, 'alcfreq'] = 88.0
    raw_responses.value_labels['alcfreq'] = {**raw_responses.value_labels['alcfreq'], 88.0: "Don't know"}

    typed = apply_schema(raw_responses, [categorical('alcfreq', missing_codes=(77, 88, 99))])

    assert pd.isna(typed.data['alcfreq'].iloc[0])
    assert typed.data['alcfreq'].iloc[1] == 'Several times a week'


def test_missing_codes_read_from_text_columns():
    table = LabelledTable(pd.DataFrame({'agea': ['34', '999']}), name='responses')

    typed = apply_schema(table, [numeric('agea', missing_codes=(999,))])

    assert typed.data['agea'].iloc[0] == 34.0
    assert pd.isna(typed.data['agea'].iloc[1])


def test_identifiers_cannot_have_missing_codes():
    with pytest.raises(SchemaError):
        ColumnSpec('idno', ColumnKind.IDENTIFIER, missing_codes=(999,))
