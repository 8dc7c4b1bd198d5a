import pandas as pd
import re
from typing import List, Dict

# Heaps given a multiprocessing_logger.Logger write one line per operation:
# <datetime> <process> <heap name> <level> <operation>, <outcome>, <numel>, <capacity>

def parse_logs(filename: str) -> List[Dict]:

    log_entry = re.compile(r"""
        (?P<datetime>\d+-\d+-\d+ \s+ \d+:\d+:\d+,\d+) \s+
        (?P<process_id>\S+) \s+
        (?P<process_name>(\w|\.)+) \s+
        (?P<loglevel>\w+) \s+
        (?P<operation>push|pop) ,\s+
        (?P<outcome>[A-Z]+) ,\s+
        (?P<numel>\d+) ,\s+
        (?P<capacity>\d+)
        """, re.VERBOSE)
    
    with open(filename, 'r') as f:
        content = f.read()
        entries = [e.groupdict() for e in log_entry.finditer(content)]

    return entries

def load_logs(filename: str) -> pd.DataFrame:

    data = pd.DataFrame(
        parse_logs(filename),
        columns = [
            'datetime', 'process_id', 'process_name', 'loglevel',
            'operation', 'outcome', 'numel', 'capacity'
        ]
    )
    data['datetime'] = pd.to_datetime(data['datetime'], format='%Y-%m-%d %H:%M:%S,%f')
    data = data.astype({
        'process_id': 'str',
        'process_name': 'str',
        'loglevel': 'str',
        'operation': 'str',
        'outcome': 'str',
        'numel': 'int64',
        'capacity': 'int64'
    })
    return data

def summarize_logs(filename: str) -> pd.DataFrame:
    '''number of operations per heap, operation and outcome'''

    data = load_logs(filename)
    return (
        data
        .groupby(['process_name', 'operation', 'outcome'])
        .size()
        .rename('count')
        .reset_index()
    )
