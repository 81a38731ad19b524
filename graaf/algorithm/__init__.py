"""Graph algorithms: transposition, cliques, colouring, spanning trees and shortest paths."""