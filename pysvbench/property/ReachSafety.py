
from pysvbench.sink import ErrorSink
from pysvbench.verdict import Verdict

# CHECK( init(main()), LTL(G ! call(reach_error())) )

def get_sink():
    return ErrorSink()

def check_sink(sink):
    return Verdict.FALSE if sink.reached else Verdict.TRUE
