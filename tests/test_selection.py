import pandas as pd
import pytest

from ess_prep.errors import MissingColumnError, PipelineConfigError
from ess_prep.processing.selection import check_columns, select_columns


def test_select_columns_keeps_requested_order_and_labels(raw_responses):
    selected = select_columns(raw_responses, ['cgtsday', 'idno', 'gndr'])

    assert selected.columns == ['cgtsday', 'idno', 'gndr']
    assert selected.n_rows == raw_responses.n_rows
    assert selected.label_for('cgtsday') == 'How many cigarettes smoke on typical day'
    assert selected.label_for('gndr') == 'Gender'
    assert 'alcfreq' not in selected.column_labels
    assert set(selected.value_labels) == {'gndr'}


def test_select_columns_preserves_row_order(raw_responses):
    selected = select_columns(raw_responses, ['idno'])
    assert selected.data['idno'].tolist() == raw_responses.data['idno'].tolist()


def test_missing_columns_are_all_reported(raw_responses):
    with pytest.raises(MissingColumnError) as excinfo:
        select_columns(raw_responses, ['idno', 'hinctnta', 'cgtsday', 'alcbnge'])

    assert excinfo.value.missing == ['hinctnta', 'alcbnge']
    assert excinfo.value.table_name == 'responses'


def test_missing_column_is_a_config_error_raised_before_rows_are_touched(raw_responses):
    before = raw_responses.data.copy()

    with pytest.raises(PipelineConfigError):
        check_columns(raw_responses, ['not_a_column'])

    pd.testing.assert_frame_equal(raw_responses.data, before)


def test_repeated_column_request_is_rejected(raw_responses):
    with pytest.raises(PipelineConfigError, match='more than once'):
        select_columns(raw_responses, ['idno', 'gndr', 'idno'])


def test_select_columns_does_not_share_data_with_source(raw_responses):
    selected = select_columns(raw_responses, ['idno', 'agea'])
    selected.data.loc[0, 'agea'] = 99.0

    assert raw_responses.data.loc[0, 'agea'] == 34.0
