import os

from triwalk import cli
from triwalk.walk import api


def test_cli_random_targets(capsys):
    df=cli.parse_and_run(['-n','40','-s','3','-r','4'])
    assert len(df)==4*len(api.WALKS)
    assert (df.status==api.STATUS_OK).all()
    out=capsys.readouterr().out
    assert 'n_orientations' in out

def test_cli_targets_and_plot(tmp_path):
    fn=str(tmp_path / 'walks.png')
    df=cli.parse_and_run(['-n','40','-s','3','-w','10',
                          '-t','1','2','-t','-30','0',
                          '-m','swalk','-m','straight',
                          '--plot',fn])
    assert list(df.method)==['swalk','straight']*2
    # second target is outside the square
    assert df[df.target==1].infinite.all()
    assert os.path.exists(fn)
