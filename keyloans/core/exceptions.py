class KeyLoansError(Exception): pass

class InvalidSnapshotError(KeyLoansError): pass

class LoanTimelineError(KeyLoansError): pass
