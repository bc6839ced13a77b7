import numpy as np
import pandas as pd
import pytest

from ess_prep.tables import LabelledTable


NAN = np.nan

OUTNIC_LABELS = {
    1.0: 'Complete and valid interview related to CF',
    3.0: 'Refusal by respondent',
    5.0: 'No contact',
}
CNTRY_LABELS = {'GB': 'United Kingdom', 'DE': 'Germany'}
CONDITION_LABELS = {1.0: 'Very good', 2.0: 'Satisfactory', 3.0: 'Bad'}
AMOUNT_LABELS = {1.0: 'Very large amount', 2.0: 'Small amount', 3.0: 'None or almost none'}
SMOKING_LABELS = {
    1.0: 'I smoke daily',
    2.0: 'I smoke but not every day',
    3.0: "I don't smoke now but I used to",
    4.0: 'I have only smoked a few times',
    5.0: 'I have never smoked',
}
ALCFREQ_LABELS = {
    1.0: 'Every day',
    2.0: 'Several times a week',
    3.0: 'Once a week',
    4.0: '2-3 times a month',
    5.0: 'Once a month',
    6.0: 'Less than once a month',
    7.0: 'Never',
}
GNDR_LABELS = {1.0: 'Male', 2.0: 'Female'}
EISCED_LABELS = {1.0: 'ES-ISCED I', 2.0: 'ES-ISCED II', 5.0: 'ES-ISCED V1'}


@pytest.fixture
def raw_paradata():
    """Contact form rows as pyreadstat returns them: numeric codes plus labels."""
    df = pd.DataFrame({
        'idno': [101.0, 102.0, 103.0, 104.0, 105.0, 106.0],
        'cntry': ['GB', 'GB', 'GB', 'DE', 'GB', 'GB'],
        'outnic': [3.0, 1.0, 1.0, 1.0, 5.0, 1.0],
        'physa': [1.0, 2.0, 2.0, 1.0, NAN, 3.0],
        'littera': [3.0, 3.0, 2.0, 3.0, 1.0, 3.0],
        'vandaa': [3.0, 3.0, 3.0, 3.0, 2.0, NAN],
        'intnum': [9, 9, 9, 4, 9, 7],
    })
    return LabelledTable(
        data=df,
        column_labels={
            'idno': 'Respondent identification number',
            'cntry': 'Country',
            'outnic': 'Outcome of contact (not imputed)',
            'physa': 'Assessment of overall physical condition building/house',
            'littera': 'Amount of litter and rubbish in the immediate vicinity',
            'vandaa': 'Amount of vandalism and graffiti in the immediate vicinity',
        },
        value_labels={
            'cntry': CNTRY_LABELS,
            'outnic': OUTNIC_LABELS,
            'physa': CONDITION_LABELS,
            'littera': AMOUNT_LABELS,
            'vandaa': AMOUNT_LABELS,
        },
        name='paradata',
    )


@pytest.fixture
def raw_sample():
    df = pd.DataFrame({
        'idno': [102.0, 103.0, 104.0, 106.0],
        'cntry': ['GB', 'GB', 'DE', 'GB'],
        'psu': [2001.0, 2001.0, 3001.0, 2002.0],
        'stratum': [11.0, 11.0, 31.0, 12.0],
        'prob': [0.00021, 0.00021, 0.00012, 0.00034],
    })
    return LabelledTable(
        data=df,
        column_labels={
            'idno': 'Respondent identification number',
            'psu': 'Primary sampling unit',
            'stratum': 'Sampling stratum',
            'prob': 'Inclusion probability',
        },
        value_labels={'cntry': CNTRY_LABELS},
        name='sample',
    )


@pytest.fixture
def raw_responses():
    df = pd.DataFrame({
        'idno': [102.0, 103.0, 104.0, 106.0],
        'cntry': ['GB', 'GB', 'DE', 'GB'],
        'cgtsmke': [5.0, 1.0, 1.0, 2.0],
        'cgtsday': [NAN, 12.0, 20.0, NAN],
        'alcfreq': [3.0, 2.0, 1.0, 7.0],
        'alcwkdy': [7.0, 2.0, 1.0, NAN],
        'alcwknd': [0.0, 4.0, 1.0, NAN],
        'gndr': [2.0, 1.0, 1.0, 2.0],
        'agea': [34.0, 61.0, 45.0, 27.0],
        'eisced': [5.0, 2.0, 1.0, 5.0],
        'lrscale': [4.0, 7.0, NAN, 5.0],
        'health': [2.0, 3.0, 1.0, 1.0],
    })
    return LabelledTable(
        data=df,
        column_labels={
            'idno': 'Respondent identification number',
            'cgtsmke': 'Cigarette smoking behaviour',
            'cgtsday': 'How many cigarettes smoke on typical day',
            'alcfreq': 'How often drink alcohol',
            'alcwkdy': 'Grams alcohol, last time drinking on a weekday, Monday to Thursday',
            'alcwknd': 'Grams alcohol, last time drinking on a weekend day, Friday to Sunday',
            'gndr': 'Gender',
            'agea': 'Age of respondent, calculated',
            'eisced': 'Highest level of education, ES - ISCED',
            'lrscale': 'Placement on left right scale',
        },
        value_labels={
            'cntry': CNTRY_LABELS,
            'cgtsmke': SMOKING_LABELS,
            'alcfreq': ALCFREQ_LABELS,
            'gndr': GNDR_LABELS,
            'eisced': EISCED_LABELS,
        },
        name='responses',
    )


@pytest.fixture
def raw_tables(raw_paradata, raw_sample, raw_responses):
    return {
        'paradata': raw_paradata,
        'sample': raw_sample,
        'responses': raw_responses,
    }
